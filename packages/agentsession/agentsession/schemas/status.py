"""Status schemas written by the reconciler and read by clients."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from agentsession.schemas._base import WireModel


class SessionPhase(StrEnum):
    """Lifecycle phase reported in ``status.phase``."""

    PENDING = "Pending"
    CREATING = "Creating"
    RUNNING = "Running"
    STOPPING = "Stopping"
    STOPPED = "Stopped"
    COMPLETED = "Completed"
    FAILED = "Failed"
    ERROR = "Error"


class ConditionStatus(StrEnum):
    """Tri-state condition status, as in Kubernetes conditions."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class Condition(WireModel):
    """A typed status entry; at most one current entry per ``type``."""

    type: str
    status: ConditionStatus
    reason: str = ""
    message: str = ""
    last_transition_time: str | None = Field(
        default=None,
        description="RFC 3339 UTC time of the last status change",
    )
    observed_generation: int = Field(default=0, ge=0)


class ReconciledRepo(WireModel):
    """Observed clone/push outcome for the spec repo at the same position."""

    url: str
    branch: str
    name: str = ""
    status: str = ""
    cloned_at: str | None = None


class ReconciledWorkflow(WireModel):
    """Observed outcome of loading the session's active workflow."""

    git_url: str
    branch: str
    path: str = ""
    status: str = ""
    applied_at: str | None = None


class SessionStatus(WireModel):
    """Reconciler-owned observed state of a session."""

    observed_generation: int = Field(default=0, ge=0)
    # Known values are SessionPhase; unknown phases are kept as written
    phase: str = SessionPhase.PENDING.value
    start_time: str | None = None
    completion_time: str | None = None
    reconciled_repos: list[ReconciledRepo] = Field(default_factory=list)
    reconciled_workflow: ReconciledWorkflow | None = None
    sdk_session_id: str = ""
    sdk_restart_count: int = Field(default=0, ge=0)
    conditions: list[Condition] = Field(default_factory=list)
