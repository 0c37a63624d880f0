"""Core error hierarchy for AgentSession."""

from __future__ import annotations

from enum import StrEnum


class AgentSessionError(Exception):
    """Base exception for all AgentSession errors."""


class ValidationErrorKind(StrEnum):
    """Client-correctable repo validation failures, in check order."""

    MISSING_INPUT = "MissingInput"
    MISSING_INPUT_URL = "MissingInputURL"
    IDENTICAL_INPUT_OUTPUT = "IdenticalInputOutput"


class RepoValidationError(AgentSessionError):
    """Raised when a submitted repo configuration breaks a validation rule.

    ``index`` is set when the repo was validated as part of a ``repos``
    sequence, so the request layer can point at the offending entry.
    """

    kind: ValidationErrorKind

    def __init__(self, message: str, *, index: int | None = None) -> None:
        self.message = message
        self.index = index
        if index is not None:
            message = f"repos[{index}]: {message}"
        super().__init__(message)

    def at_index(self, index: int) -> RepoValidationError:
        """Return a copy of this error bound to a position in ``repos``."""
        return type(self)(self.message, index=index)


class MissingInputError(RepoValidationError):
    """Raised when a repo has no input location."""

    kind = ValidationErrorKind.MISSING_INPUT


class MissingInputURLError(RepoValidationError):
    """Raised when the input location's URL is empty or whitespace."""

    kind = ValidationErrorKind.MISSING_INPUT_URL


class IdenticalInputOutputError(RepoValidationError):
    """Raised when output points at the same URL and branch as input."""

    kind = ValidationErrorKind.IDENTICAL_INPUT_OUTPUT


class MalformedEncodedRepoError(AgentSessionError):
    """Raised when a stored repo map cannot be decoded.

    Indicates corrupted data or a schema mismatch between writer and
    reader. Retrying will not help.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class InconsistentStatusError(AgentSessionError):
    """Raised when reconciled repos do not line up with the spec's repos."""
