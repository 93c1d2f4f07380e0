"""Abstract repository interface (port) for HostRecord persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import HostRecord


class HostRecordRepository(ABC):
    """Port for host record persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, entity_type: str, record_id: str) -> HostRecord | None:
        """Retrieve a single record of the given entity type by its id."""
        ...

    @abstractmethod
    async def update(self, record: HostRecord) -> HostRecord:
        """Persist the record's data column."""
        ...
