"""Session admission — validated request to stored resource, and back.

``build_session_resource`` is the write path: repos are validated as a
whole before anything is produced, then stored through the repo codec.
``load_session`` is the read path used by the reconciler: the stored
``repos`` maps are decoded straight back into ``SimpleRepo`` values so the
untyped form never travels past this module.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from agentsession.api_schemas import CreateSessionRequest
from agentsession.core.errors import RepoValidationError
from agentsession.runtime.repo_codec import decode_repos, encode_repos
from agentsession.runtime.repo_validator import validate_repos
from agentsession.schemas.session import AgenticSession, SessionSpec
from agentsession.schemas.status import SessionStatus
from agentsession.settings import SessionSettings, SettingsManager

logger = logging.getLogger(__name__)

PARENT_SESSION_ANNOTATION = "vteam.ambient-code/parent-session-id"


def build_session_spec(
    request: CreateSessionRequest,
    *,
    project: str = "",
    settings: SessionSettings | None = None,
) -> SessionSpec:
    """Validate the request's repos and assemble the desired spec.

    ``auto_push_on_complete`` fills in ``auto_push`` for repos that leave it
    unset; an explicit per-repo value wins.
    """
    settings = settings or SessionSettings()

    try:
        validate_repos(request.repos)
    except RepoValidationError as exc:
        logger.warning("Rejected session repos: %s", exc)
        raise

    repos = request.repos
    if request.auto_push_on_complete is not None:
        repos = [
            repo if repo.auto_push is not None
            else repo.model_copy(update={"auto_push": request.auto_push_on_complete})
            for repo in repos
        ]

    return SessionSpec(
        initial_prompt=request.initial_prompt,
        interactive=(
            request.interactive
            if request.interactive is not None
            else settings.default_interactive
        ),
        display_name=request.display_name or settings.default_display_name,
        llm_settings=request.llm_settings or {},
        timeout=request.timeout if request.timeout is not None else settings.default_timeout,
        user_context=request.user_context,
        environment_variables=request.environment_variables or {},
        project=project,
        repos=repos,
    )


def dump_spec(spec: SessionSpec) -> dict[str, Any]:
    """Serialize a spec for storage; ``repos`` goes through the repo codec."""
    data = spec.model_dump(by_alias=True, exclude_none=True, exclude={"repos"})
    if spec.repos:
        data["repos"] = encode_repos(spec.repos)
    return data


def build_session_resource(
    name: str,
    namespace: str,
    request: CreateSessionRequest,
    settings: SessionSettings | None = None,
    *,
    settings_manager: SettingsManager | None = None,
) -> dict[str, Any]:
    """Build the untyped resource object to persist for a new session.

    Without explicit ``settings``, defaults are loaded through
    ``settings_manager`` (the default config directory if omitted).

    Raises :class:`RepoValidationError` (nothing is built) if any repo is
    invalid.
    """
    if settings is None:
        settings = (settings_manager or SettingsManager()).load()
    spec = build_session_spec(request, project=namespace, settings=settings)

    metadata: dict[str, Any] = {"name": name, "namespace": namespace}
    if request.labels:
        metadata["labels"] = dict(request.labels)
    annotations = dict(request.annotations or {})
    if request.parent_session_id:
        annotations[PARENT_SESSION_ANNOTATION] = request.parent_session_id
    if annotations:
        metadata["annotations"] = annotations

    logger.debug("Built session %s/%s with %d repos", namespace, name, len(spec.repos))
    return {
        "apiVersion": settings.api_version,
        "kind": settings.kind,
        "metadata": metadata,
        "spec": dump_spec(spec),
    }


def load_session(obj: Mapping[str, Any]) -> AgenticSession:
    """Parse a stored resource object into a typed session.

    Raises :class:`MalformedEncodedRepoError` if a stored repo cannot be
    decoded. Decoded repos are not re-validated.
    """
    spec_data = dict(obj.get("spec") or {})
    repos = decode_repos(spec_data.pop("repos", None))
    spec = SessionSpec.model_validate({**spec_data, "repos": repos})

    status_data = obj.get("status")
    status = SessionStatus.model_validate(status_data) if status_data else None

    return AgenticSession(
        api_version=obj.get("apiVersion", ""),
        kind=obj.get("kind", ""),
        metadata=dict(obj.get("metadata") or {}),
        spec=spec,
        status=status,
    )
