"""Session resource schemas: desired spec, observed status, and the envelope."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from agentsession.schemas._base import WireModel
from agentsession.schemas.repo import SimpleRepo
from agentsession.schemas.status import SessionStatus


class WorkflowSelection(WireModel):
    """A workflow to load into the session."""

    git_url: str
    branch: str = ""
    path: str = ""


class SessionSpec(WireModel):
    """Client-authored desired state of a session.

    Only ``repos`` is interpreted here; the remaining fields belong to
    other subsystems and pass through unchanged.
    """

    initial_prompt: str = ""
    interactive: bool = False
    display_name: str = ""
    llm_settings: dict[str, Any] = Field(default_factory=dict)
    timeout: int = Field(default=0, ge=0)
    user_context: dict[str, Any] | None = None
    bot_account: dict[str, Any] | None = None
    resource_overrides: dict[str, Any] | None = None
    environment_variables: dict[str, str] = Field(default_factory=dict)
    project: str = ""
    repos: list[SimpleRepo] = Field(default_factory=list)
    active_workflow: WorkflowSelection | None = None


class AgenticSession(WireModel):
    """The session custom resource as read back from storage."""

    api_version: str
    kind: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    spec: SessionSpec
    status: SessionStatus | None = None
