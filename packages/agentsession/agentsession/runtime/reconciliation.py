"""Reconciled repo bookkeeping — status entries paired with spec repos."""

from __future__ import annotations

from collections.abc import Sequence

from agentsession.core.errors import InconsistentStatusError
from agentsession.schemas.repo import SimpleRepo, trim_space
from agentsession.schemas.session import SessionSpec
from agentsession.schemas.status import ReconciledRepo, SessionStatus

DEFAULT_BRANCH = "main"


def derive_repo_name(url: str) -> str:
    """Directory name for a clone: last path segment without ``.git``."""
    name = trim_space(url).rstrip("/").rsplit("/", 1)[-1]
    # scp-style remotes: git@host:repo.git
    name = name.rsplit(":", 1)[-1]
    return name.removesuffix(".git")


def reconciled_repo_from(
    repo: SimpleRepo,
    *,
    status: str = "",
    cloned_at: str | None = None,
) -> ReconciledRepo:
    """Build the status entry describing ``repo``'s input clone.

    An unset or blank input branch is reported as the default branch.
    """
    if repo.input is None:
        raise ValueError("repo has no input location")
    url, branch = repo.input.normalized()
    return ReconciledRepo(
        url=url,
        branch=branch or DEFAULT_BRANCH,
        name=derive_repo_name(url),
        status=status,
        cloned_at=cloned_at,
    )


def check_status_consistency(spec: SessionSpec, status: SessionStatus | None) -> None:
    """Raise if ``status.reconciled_repos`` does not pair up with ``spec.repos``.

    ``status=None`` means the reconciler has not reported yet. Once a status
    exists its reconciled repos must match the spec's repos one for one.
    """
    if status is None:
        return
    reconciled = status.reconciled_repos
    if len(reconciled) != len(spec.repos):
        raise InconsistentStatusError(
            f"status has {len(reconciled)} reconciled repos "
            f"but spec has {len(spec.repos)} repos"
        )


def replace_reconciled_repos(
    status: SessionStatus,
    spec: SessionSpec,
    reconciled: Sequence[ReconciledRepo],
) -> None:
    """Replace the whole reconciled sequence for one reconciliation pass.

    Entries are positional: ``reconciled[i]`` describes ``spec.repos[i]``.
    """
    if len(reconciled) != len(spec.repos):
        raise InconsistentStatusError(
            f"got {len(reconciled)} reconciled repos for {len(spec.repos)} spec repos"
        )
    status.reconciled_repos = list(reconciled)
