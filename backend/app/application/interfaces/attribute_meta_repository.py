"""Abstract repository interface (port) for attribute metadata records."""

from abc import ABC, abstractmethod

from app.domain.entities import AttributeValueRecord


class AttributeMetaRepository(ABC):

    @abstractmethod
    async def search(
        self,
        attribute_id: str,
        term: str = "",
        *,
        limit: int = 50,
    ) -> list[AttributeValueRecord]:
        """Keyword search over key/value of one field definition's records."""
        ...
