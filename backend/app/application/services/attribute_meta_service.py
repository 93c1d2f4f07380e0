"""Application service for attribute metadata search."""

import logging

from app.application.interfaces import AttributeMetaRepository
from app.domain.entities import AttributeValueRecord

logger = logging.getLogger(__name__)


class AttributeMetaService:

    def __init__(self, repository: AttributeMetaRepository, *, default_limit: int = 50, max_limit: int = 200):
        self._repository = repository
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def search(
        self,
        term: str,
        attribute_id: str,
        limit: int | None = None,
    ) -> list[AttributeValueRecord]:
        """Keyword search within one field definition's values; blank terms list everything."""
        effective_limit = min(limit or self._default_limit, self._max_limit)
        records = await self._repository.search(
            attribute_id, term.strip(), limit=effective_limit
        )
        logger.debug(
            "Attribute meta search attribute=%s term=%r → %d hits",
            attribute_id, term, len(records),
        )
        return records
