"""Condition bookkeeping for session status — upsert-by-type."""

from __future__ import annotations

from datetime import UTC, datetime

from agentsession.schemas.status import Condition, ConditionStatus


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as an RFC 3339 UTC string with second precision."""
    return moment.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def find_condition(conditions: list[Condition], condition_type: str) -> Condition | None:
    """Return the current condition of ``condition_type``, or None."""
    for condition in conditions:
        if condition.type == condition_type:
            return condition
    return None


def is_condition_true(conditions: list[Condition], condition_type: str) -> bool:
    condition = find_condition(conditions, condition_type)
    return condition is not None and condition.status == ConditionStatus.TRUE


def upsert_condition(
    conditions: list[Condition],
    condition: Condition,
    *,
    now: datetime | None = None,
) -> Condition:
    """Insert or replace the entry of ``condition.type`` in ``conditions``.

    The list is modified in place and the stored entry is returned.
    ``last_transition_time`` moves only when ``status`` changes; otherwise
    reason, message and observed generation are refreshed and the earlier
    transition time is kept. New types are appended, so the order of the
    other entries never changes.

    The caller must be the single writer of this status.
    """
    timestamp = condition.last_transition_time or format_timestamp(now or datetime.now(UTC))

    for i, existing in enumerate(conditions):
        if existing.type != condition.type:
            continue
        if existing.status == condition.status:
            stored = existing.model_copy(update={
                "reason": condition.reason,
                "message": condition.message,
                "observed_generation": condition.observed_generation,
                "last_transition_time": existing.last_transition_time or timestamp,
            })
        else:
            stored = condition.model_copy(update={"last_transition_time": timestamp})
        conditions[i] = stored
        return stored

    stored = condition.model_copy(update={"last_transition_time": timestamp})
    conditions.append(stored)
    return stored


def remove_condition(conditions: list[Condition], condition_type: str) -> bool:
    """Drop the entry of ``condition_type``. Returns whether one was removed."""
    for i, condition in enumerate(conditions):
        if condition.type == condition_type:
            del conditions[i]
            return True
    return False
