"""Domain entity — a host entity row (order, user) carrying an attribute document."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class HostRecord:
    """Core domain entity for an order or user that owns attribute data.

    ``data`` is the serialized attribute-group document exactly as the editor
    sent it; the backend never rewrites it.
    """

    entity_type: str
    data: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, data: str | None = None) -> None:
        """Replace the attribute document and refresh the updated_at timestamp."""
        if data is not None:
            self.data = data
        self.updated_at = datetime.now(timezone.utc)
