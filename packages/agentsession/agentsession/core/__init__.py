"""AgentSession core — error hierarchy."""

from agentsession.core.errors import (
    AgentSessionError,
    IdenticalInputOutputError,
    InconsistentStatusError,
    MalformedEncodedRepoError,
    MissingInputError,
    MissingInputURLError,
    RepoValidationError,
    ValidationErrorKind,
)

__all__ = [
    "AgentSessionError",
    "IdenticalInputOutputError",
    "InconsistentStatusError",
    "MalformedEncodedRepoError",
    "MissingInputError",
    "MissingInputURLError",
    "RepoValidationError",
    "ValidationErrorKind",
]
