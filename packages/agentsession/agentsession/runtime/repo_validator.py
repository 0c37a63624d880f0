"""Repo validation — admission checks for user-submitted repo configuration."""

from __future__ import annotations

from collections.abc import Sequence

from agentsession.core.errors import (
    IdenticalInputOutputError,
    MissingInputError,
    MissingInputURLError,
    RepoValidationError,
)
from agentsession.schemas.repo import SimpleRepo, trim_space


def check_repo(repo: SimpleRepo) -> RepoValidationError | None:
    """Return the first rule ``repo`` breaks, or None if it is valid.

    Rules run in a fixed order so the reported error is deterministic:
    - ``input`` must be present
    - ``input.url`` must be non-blank after trimming
    - ``output``, if present, must differ from ``input`` in URL or branch
      (an unset branch and a blank one compare equal)
    """
    if repo.input is None:
        return MissingInputError("input is required")

    if not trim_space(repo.input.url):
        return MissingInputURLError("input.url is required")

    if repo.output is not None and repo.output.normalized() == repo.input.normalized():
        return IdenticalInputOutputError(
            "output repository must differ from input (different URL or branch required)"
        )

    return None


def validate_repo(repo: SimpleRepo) -> None:
    """Raise the first :class:`RepoValidationError` ``repo`` triggers."""
    error = check_repo(repo)
    if error is not None:
        raise error


def validate_repos(repos: Sequence[SimpleRepo]) -> None:
    """Validate every entry of a ``repos`` sequence.

    Raises on the first invalid entry with its index attached. Nothing
    should be persisted unless this returns.
    """
    for i, repo in enumerate(repos):
        error = check_repo(repo)
        if error is not None:
            raise error.at_index(i)
