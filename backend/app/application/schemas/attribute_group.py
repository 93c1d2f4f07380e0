"""Pydantic schemas for the persisted attribute-group document.

These mirror the JSON stored in a host entity's ``data`` column. The codec
validates raw JSON against them before mapping to frozen domain entities.
"""

import json
from typing import Any

from pydantic import BaseModel, Field, field_validator


class BoundValueSchema(BaseModel):
    id: str | int
    title: str | None = ""
    value: Any = ""


class AttributeFieldSchema(BaseModel):
    id: str | int
    title: str | None = ""
    value: str | BoundValueSchema | list[BoundValueSchema] | None = ""

    @field_validator("value", mode="before")
    @classmethod
    def _scalar_as_text(cls, v: Any) -> Any:
        """Numbers and booleans written by other clients are kept as their JSON text."""
        if isinstance(v, (bool, int, float)):
            return json.dumps(v)
        return v


class AttributeInstanceSchema(BaseModel):
    id: str | int
    title: str | None = ""
    children: list[list[AttributeFieldSchema]] = Field(default_factory=list)


class AttributeGroupSchema(BaseModel):
    id: str | int
    title: str | None = ""
    attributes: list[AttributeInstanceSchema] = Field(default_factory=list)


class AttributeGroupsResponse(BaseModel):
    """Parsed (and, when needed, migrated) document for one host record."""

    record_id: str
    entity_type: str
    groups: list[AttributeGroupSchema]
    parse_error: bool = False
