"""Session settings — defaults applied when admitting new sessions."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "AGENTSESSION_CONFIG_DIR"
SETTINGS_FILE = "settings.json"


class SessionSettings(BaseModel):
    """Admission defaults for fields a create request leaves unset."""

    # Resource identity
    api_version: str = "vteam.ambient-code/v1alpha1"
    kind: str = "AgenticSession"

    # Spec defaults
    default_timeout: int = Field(default=300, gt=0, description="Session timeout in seconds")
    default_display_name: str = ""
    default_interactive: bool = False


def default_config_dir() -> Path:
    """``$AGENTSESSION_CONFIG_DIR`` if set, else ``~/.agentsession``."""
    return Path(os.environ.get(CONFIG_DIR_ENV) or os.path.expanduser("~/.agentsession"))


class SettingsManager:
    """Reads and writes the admission defaults file.

    A missing file yields the built-in defaults. A file that does not parse
    is logged and ignored so a bad edit cannot block session creation.
    """

    def __init__(self, config_dir: str | Path | None = None) -> None:
        base = Path(config_dir) if config_dir is not None else default_config_dir()
        self.path = base / SETTINGS_FILE

    def load(self) -> SessionSettings:
        try:
            raw = self.path.read_text()
        except FileNotFoundError:
            return SessionSettings()
        try:
            return SessionSettings.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Ignoring invalid session settings in %s: %s", self.path, exc)
            return SessionSettings()

    def save(self, settings: SessionSettings) -> Path:
        """Write ``settings`` and return the file path."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(settings.model_dump_json(indent=2) + "\n")
        return self.path
