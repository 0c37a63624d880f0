"""AgentSession schemas — Pydantic v2 models for the session resource."""

from agentsession.schemas.repo import RepoLocation, SimpleRepo
from agentsession.schemas.session import AgenticSession, SessionSpec, WorkflowSelection
from agentsession.schemas.status import (
    Condition,
    ConditionStatus,
    ReconciledRepo,
    ReconciledWorkflow,
    SessionPhase,
    SessionStatus,
)

__all__ = [
    "AgenticSession",
    "Condition",
    "ConditionStatus",
    "ReconciledRepo",
    "ReconciledWorkflow",
    "RepoLocation",
    "SessionPhase",
    "SessionSpec",
    "SessionStatus",
    "SimpleRepo",
    "WorkflowSelection",
]
