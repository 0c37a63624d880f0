"""Repo codec — SimpleRepo to/from the untyped map stored in ``spec.repos``.

Both directions are driven by the same field tables below, so a field is
added, renamed, or made optional in exactly one place. The stored shape is::

    {
      "input":  {"url": str, "branch"?: str},
      "output"?: {"url": str, "branch"?: str},
      "autoPush"?: bool
    }

An unset (``None``) value is always an absent key; ``False`` and ``""``
are encoded as-is. A repo without ``input`` encodes to ``{}``. Neither
direction applies validation rules.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from agentsession.core.errors import MalformedEncodedRepoError
from agentsession.schemas.repo import RepoLocation, SimpleRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordSchema:
    """A model class plus the fields that make up its stored form."""

    model: type[BaseModel]
    fields: tuple[FieldSpec, ...]


@dataclass(frozen=True)
class FieldSpec:
    """One stored key: where it lives on the model and what it holds."""

    key: str
    attr: str
    type: type | RecordSchema
    required: bool = False


LOCATION_SCHEMA = RecordSchema(
    model=RepoLocation,
    fields=(
        FieldSpec("url", "url", str, required=True),
        FieldSpec("branch", "branch", str),
    ),
)

REPO_SCHEMA = RecordSchema(
    model=SimpleRepo,
    fields=(
        FieldSpec("input", "input", LOCATION_SCHEMA, required=True),
        FieldSpec("output", "output", LOCATION_SCHEMA),
        FieldSpec("autoPush", "auto_push", bool),
    ),
)


def _encode(obj: BaseModel, schema: RecordSchema) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for field in schema.fields:
        value = getattr(obj, field.attr)
        if value is None:
            # a record without its required fields has no stored form
            if field.required:
                return {}
            continue
        if isinstance(field.type, RecordSchema):
            value = _encode(value, field.type)
        out[field.key] = value
    return out


def _decode(data: Any, schema: RecordSchema, path: str) -> Any:
    if not isinstance(data, Mapping):
        raise MalformedEncodedRepoError(
            path, f"expected a mapping, got {type(data).__name__}"
        )

    values: dict[str, Any] = {}
    for field in schema.fields:
        field_path = f"{path}.{field.key}"
        value = data.get(field.key)
        if value is None:
            if field.required:
                raise MalformedEncodedRepoError(field_path, "is required")
            continue
        if isinstance(field.type, RecordSchema):
            value = _decode(value, field.type, field_path)
        # bool is a subclass of int, so compare exact types
        elif type(value) is not field.type:
            raise MalformedEncodedRepoError(
                field_path,
                f"expected {field.type.__name__}, got {type(value).__name__}",
            )
        values[field.attr] = value
    return schema.model(**values)


def encode_repo(repo: SimpleRepo) -> dict[str, Any]:
    """Convert a validated repo to the map stored in ``spec.repos[]``."""
    return _encode(repo, REPO_SCHEMA)


def decode_repo(data: Any, *, path: str = "repo") -> SimpleRepo:
    """Rebuild a repo from its stored map.

    Missing optional keys decode to None. A missing ``input``, a missing
    location ``url``, a non-mapping payload, or a value of the wrong type
    raises :class:`MalformedEncodedRepoError`. Run ``validate_repo`` on the
    result if business rules matter to the caller.
    """
    try:
        return _decode(data, REPO_SCHEMA, path)
    except MalformedEncodedRepoError as exc:
        logger.warning("Malformed stored repo: %s", exc)
        raise


def encode_repos(repos: Iterable[SimpleRepo]) -> list[dict[str, Any]]:
    """Encode a ``repos`` sequence, preserving order."""
    return [encode_repo(repo) for repo in repos]


def decode_repos(items: Sequence[Any] | None) -> list[SimpleRepo]:
    """Decode a stored ``repos`` sequence; errors name the entry index."""
    if items is None:
        return []
    if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Sequence):
        raise MalformedEncodedRepoError(
            "repos", f"expected a list, got {type(items).__name__}"
        )
    return [decode_repo(item, path=f"repos[{i}]") for i, item in enumerate(items)]
