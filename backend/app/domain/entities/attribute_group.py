"""Domain entities for attribute groups — the per-entity attribute document.

A document is an ordered tuple of :class:`AttributeGroup`. Every entity here
is frozen: edits build new snapshots instead of mutating old ones, so a
snapshot kept as the saved baseline stays valid while the user keeps editing.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TextValue:
    """Plain text field value (text fields and unbound selects)."""

    text: str = ""


@dataclass(frozen=True)
class BoundValue:
    """A value bound from an attribute metadata record."""

    id: str | int
    title: str = ""
    value: Any = ""


@dataclass(frozen=True)
class MultiBoundValue:
    """Ordered checkbox selection, unique by item id."""

    items: tuple[BoundValue, ...] = ()

    def contains(self, item_id: str | int) -> bool:
        return any(item.id == item_id for item in self.items)


FieldValue = TextValue | BoundValue | MultiBoundValue


@dataclass(frozen=True)
class AttributeField:
    """One concrete field inside a row."""

    id: str | int
    title: str
    value: FieldValue = TextValue()


Row = tuple[AttributeField, ...]


@dataclass(frozen=True)
class AttributeInstance:
    """A template bound into a group; ``id`` is the template id."""

    id: str | int
    title: str
    children: tuple[Row, ...] = ()


@dataclass(frozen=True)
class AttributeGroup:
    """A named, ordered collection of attribute instances."""

    id: str | int
    title: str
    attributes: tuple[AttributeInstance, ...] = ()

    def find_attribute(self, attribute_id: str | int) -> AttributeInstance | None:
        for attribute in self.attributes:
            if attribute.id == attribute_id:
                return attribute
        return None


GroupSnapshot = tuple[AttributeGroup, ...]


@dataclass(frozen=True)
class FieldRef:
    """Stable address of one field: group id, template id, row and field index."""

    group_id: str | int
    attribute_id: str | int
    row_index: int
    field_index: int
