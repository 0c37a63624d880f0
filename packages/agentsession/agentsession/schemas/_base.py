"""Shared base model for resource fields that travel in camelCase."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Model whose JSON form uses camelCase keys.

    Construction accepts both the Python field names and the aliases;
    dump with ``by_alias=True`` to produce the wire form.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
