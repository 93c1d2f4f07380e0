"""Ports the attribute editor talks through.

Both mirror the backend's editor-facing calls: they return an
:class:`ActionResult` for any response the server produced, and raise
:class:`~app.domain.exceptions.AttributeGatewayError` when no usable response
came back at all.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class ActionResult:
    """Decoded ``{success, data, message}`` envelope."""

    success: str
    data: Any = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.success == "success"


class AttributeMetaSearch(ABC):
    """Keyword search over attribute metadata for one field definition."""

    @abstractmethod
    async def search_attribute_meta(
        self, term: str, field_definition_id: str | int
    ) -> ActionResult:
        """``data`` holds a list of AttributeValueRecord on success."""
        ...


class HostRecordGateway(ABC):
    """Writes a host entity's serialized attribute document."""

    @abstractmethod
    async def update_record(self, entity_id: str, payload: dict[str, str]) -> ActionResult:
        ...

