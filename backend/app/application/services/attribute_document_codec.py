"""Codec for attribute-group documents stored in a host entity's ``data`` column.

Handles both shapes found in the wild:

* current — ``[{"id", "title", "attributes": [...]}, ...]``
* legacy  — a flat ``[{"id", "title", "children": [...]}, ...]`` list of
  attribute instances, written before groups existed. It is wrapped into a
  single "Default Group" on load.

Serialization is compact JSON with a fixed key order, so two documents are
equal exactly when their serialized text is equal.
"""

import json
import logging
import secrets
import string
import time
from collections.abc import Callable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from app.application.schemas.attribute_group import (
    AttributeFieldSchema,
    AttributeGroupSchema,
    AttributeInstanceSchema,
    BoundValueSchema,
)
from app.domain.entities import (
    AttributeField,
    AttributeGroup,
    AttributeInstance,
    BoundValue,
    FieldValue,
    GroupSnapshot,
    MultiBoundValue,
    TextValue,
)
from app.domain.exceptions import DocumentParseError

logger = logging.getLogger(__name__)

DEFAULT_GROUP_TITLE = "Default Group"

_GROUPS = TypeAdapter(list[AttributeGroupSchema])
_LEGACY_INSTANCES = TypeAdapter(list[AttributeInstanceSchema])
_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_group_id() -> str:
    """Opaque group token: ``group_<epoch ms>_<5 random chars>``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(5))
    return f"group_{int(time.time() * 1000)}_{suffix}"


# ── Parsing ──────────────────────────────────────────────────────────


def parse_document(
    raw: str | None,
    *,
    id_factory: Callable[[], str] = new_group_id,
) -> GroupSnapshot:
    """Decode a stored document into a group snapshot.

    Returns an empty snapshot for absent, blank, non-array or empty-array
    input. Raises DocumentParseError for invalid JSON or an array that does
    not match either document shape.
    """
    if raw is None or not raw.strip():
        return ()

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DocumentParseError(f"Invalid attribute document: {exc.msg}") from exc

    if not isinstance(parsed, list) or not parsed:
        return ()

    first = parsed[0]
    try:
        if isinstance(first, dict) and "attributes" in first:
            return tuple(_group_from_schema(g) for g in _GROUPS.validate_python(parsed))
        instances = _LEGACY_INSTANCES.validate_python(parsed)
    except ValidationError as exc:
        raise DocumentParseError(
            f"Attribute document has an unexpected shape ({exc.error_count()} errors)"
        ) from exc

    logger.info(
        "Migrating legacy attribute list (%d instances) into '%s'",
        len(instances),
        DEFAULT_GROUP_TITLE,
    )
    return (
        AttributeGroup(
            id=id_factory(),
            title=DEFAULT_GROUP_TITLE,
            attributes=tuple(_instance_from_schema(i) for i in instances),
        ),
    )


def _group_from_schema(schema: AttributeGroupSchema) -> AttributeGroup:
    return AttributeGroup(
        id=schema.id,
        title=schema.title or "",
        attributes=tuple(_instance_from_schema(a) for a in schema.attributes),
    )


def _instance_from_schema(schema: AttributeInstanceSchema) -> AttributeInstance:
    return AttributeInstance(
        id=schema.id,
        title=schema.title or "",
        children=tuple(
            tuple(_field_from_schema(f) for f in row) for row in schema.children
        ),
    )


def _field_from_schema(schema: AttributeFieldSchema) -> AttributeField:
    return AttributeField(
        id=schema.id,
        title=schema.title or "",
        value=_value_from_schema(schema.value),
    )


def _value_from_schema(
    value: str | BoundValueSchema | list[BoundValueSchema] | None,
) -> FieldValue:
    if isinstance(value, BoundValueSchema):
        return _bound_from_schema(value)
    if isinstance(value, list):
        return MultiBoundValue(tuple(_bound_from_schema(v) for v in value))
    return TextValue(value or "")


def _bound_from_schema(schema: BoundValueSchema) -> BoundValue:
    return BoundValue(id=schema.id, title=schema.title or "", value=schema.value)


# ── Serialization ────────────────────────────────────────────────────


def value_to_python(value: FieldValue) -> Any:
    if isinstance(value, BoundValue):
        return {"id": value.id, "title": value.title, "value": value.value}
    if isinstance(value, MultiBoundValue):
        return [value_to_python(item) for item in value.items]
    return value.text


def document_to_python(groups: GroupSnapshot) -> list[dict[str, Any]]:
    """Plain JSON-ready structure with the persisted key order."""
    return [
        {
            "id": group.id,
            "title": group.title,
            "attributes": [
                {
                    "id": attribute.id,
                    "title": attribute.title,
                    "children": [
                        [
                            {"id": f.id, "title": f.title, "value": value_to_python(f.value)}
                            for f in row
                        ]
                        for row in attribute.children
                    ],
                }
                for attribute in group.attributes
            ],
        }
        for group in groups
    ]


def document_to_schema(groups: GroupSnapshot) -> list[AttributeGroupSchema]:
    return _GROUPS.validate_python(document_to_python(groups))


def serialize_document(groups: GroupSnapshot) -> str:
    return json.dumps(
        document_to_python(groups),
        ensure_ascii=False,
        separators=(",", ":"),
    )


def documents_differ(current: GroupSnapshot, baseline: GroupSnapshot) -> bool:
    """Textual comparison of two snapshots over their serialized form."""
    return serialize_document(current) != serialize_document(baseline)
