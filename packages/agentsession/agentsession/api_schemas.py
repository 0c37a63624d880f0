"""Client request schemas for session creation."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from agentsession.schemas._base import WireModel
from agentsession.schemas.repo import SimpleRepo


class CreateSessionRequest(WireModel):
    """Request body for creating a session.

    Everything except ``repos`` and ``auto_push_on_complete`` is copied
    into the resource without interpretation.
    """

    initial_prompt: str = ""
    display_name: str = ""
    llm_settings: dict[str, Any] | None = None
    timeout: int | None = Field(default=None, ge=0)
    interactive: bool | None = None
    parent_session_id: str = Field(default="", alias="parent_session_id")
    repos: list[SimpleRepo] = Field(default_factory=list)
    auto_push_on_complete: bool | None = None
    user_context: dict[str, Any] | None = None
    environment_variables: dict[str, str] | None = None
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None
