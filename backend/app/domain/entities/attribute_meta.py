"""Domain entity for attribute metadata — searchable candidate values."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from app.domain.entities.attribute_group import BoundValue


@dataclass
class AttributeValueRecord:
    """A candidate value for one field definition, returned by search."""

    id: str | int
    key: str
    value: Any
    attribute_id: str | int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_bound_value(self) -> BoundValue:
        """Shape stored in a field when this record is selected."""
        return BoundValue(id=self.id, title=self.key, value=self.value)
