"""AgentSession runtime — repo validation, codec, and status bookkeeping."""

from agentsession.runtime.conditions import (
    find_condition,
    is_condition_true,
    remove_condition,
    upsert_condition,
)
from agentsession.runtime.reconciliation import (
    check_status_consistency,
    reconciled_repo_from,
    replace_reconciled_repos,
)
from agentsession.runtime.repo_codec import (
    decode_repo,
    decode_repos,
    encode_repo,
    encode_repos,
)
from agentsession.runtime.repo_validator import check_repo, validate_repo, validate_repos

__all__ = [
    "check_repo",
    "check_status_consistency",
    "decode_repo",
    "decode_repos",
    "encode_repo",
    "encode_repos",
    "find_condition",
    "is_condition_true",
    "reconciled_repo_from",
    "remove_condition",
    "replace_reconciled_repos",
    "upsert_condition",
    "validate_repo",
    "validate_repos",
]
