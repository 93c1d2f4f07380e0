"""Domain entities for attribute templates — the admin-defined field schemas."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Editor kinds a template field can declare."""

    TEXT = "text"
    SELECT = "select"
    CHECKBOX = "checkbox"

    @classmethod
    def parse(cls, raw: Any) -> "FieldType":
        """Map a stored type string to a FieldType, defaulting to TEXT."""
        try:
            return cls(raw)
        except ValueError:
            return cls.TEXT


class HostKind(str, Enum):
    """Host entity classes a template can be mapped to."""

    ORDER = "order"
    USER = "user"


@dataclass(frozen=True)
class AttributeFieldDefinition:
    """One typed field of an attribute template."""

    id: str | int
    title: str
    type: FieldType = FieldType.TEXT


@dataclass
class AttributeTemplate:
    """A named, reusable set of typed fields.

    ``mapto`` restricts which host entities may use the template; ``children``
    is the ordered field list every new row is built from.
    """

    id: str | int
    title: str
    mapto: str
    children: list[AttributeFieldDefinition] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def field_type_at(self, index: int) -> FieldType:
        """Type of the field definition at ``index``, TEXT when out of range."""
        if 0 <= index < len(self.children):
            return self.children[index].type
        return FieldType.TEXT


class AttributeCatalog:
    """Read-only view over the templates offered for one host kind."""

    def __init__(self, templates: list[AttributeTemplate], mapto: str = HostKind.ORDER.value):
        self._mapto = mapto
        self._templates = [t for t in templates if t.mapto == mapto]
        self._by_id = {t.id: t for t in self._templates}

    @property
    def mapto(self) -> str:
        return self._mapto

    @property
    def templates(self) -> list[AttributeTemplate]:
        return list(self._templates)

    def get(self, template_id: str | int) -> AttributeTemplate | None:
        return self._by_id.get(template_id)

    def __len__(self) -> int:
        return len(self._templates)
