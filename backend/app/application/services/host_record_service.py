"""Application service (use case) for host records and their attribute data."""

import json
import logging

from app.application.interfaces import HostRecordRepository
from app.application.services.attribute_document_codec import parse_document
from app.domain.entities import GroupSnapshot, HostRecord
from app.domain.exceptions import DocumentParseError, EntityNotFoundError, InvalidDocumentError

logger = logging.getLogger(__name__)


class HostRecordService:
    """Reads and writes the attribute document of orders and users. Depends on the repository port (DI)."""

    def __init__(self, repository: HostRecordRepository):
        self._repository = repository

    async def get_record(self, entity_type: str, record_id: str) -> HostRecord:
        record = await self._repository.get_by_id(entity_type, record_id)
        if record is None:
            raise EntityNotFoundError(entity_type.capitalize(), record_id)
        return record

    async def update_data(self, entity_type: str, record_id: str, data: str) -> HostRecord:
        """Overwrite the stored document after checking it is a readable group array."""
        _validate_document(data)
        record = await self.get_record(entity_type, record_id)
        record.update(data=data)
        saved = await self._repository.update(record)
        logger.info("Updated %s %s attribute data (%d bytes)", entity_type, record_id, len(data))
        return saved

    async def load_groups(self, entity_type: str, record_id: str) -> tuple[GroupSnapshot, bool]:
        """Parsed groups of a record plus whether the stored text was unreadable."""
        record = await self.get_record(entity_type, record_id)
        try:
            return parse_document(record.data), False
        except DocumentParseError as exc:
            logger.warning("Stored attribute data for %s %s is unreadable: %s", entity_type, record_id, exc)
            return (), True


def _validate_document(data: str) -> None:
    try:
        parsed = json.loads(data)
    except json.JSONDecodeError as exc:
        raise InvalidDocumentError(f"Attribute data is not valid JSON: {exc.msg}") from exc
    if not isinstance(parsed, list):
        raise InvalidDocumentError("Attribute data must be a JSON array of groups")
    try:
        parse_document(data)
    except DocumentParseError as exc:
        raise InvalidDocumentError(str(exc)) from exc
