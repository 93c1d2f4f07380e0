"""Concrete repository implementation for HostRecord backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import HostRecordRepository
from app.domain.entities import HostRecord
from app.infrastructure.database.models import HostRecordModel


class SQLAlchemyHostRecordRepository(HostRecordRepository):
    """Implements the HostRecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: HostRecordModel) -> HostRecord:
        """Map ORM model → domain entity."""
        return HostRecord(
            id=model.id,
            entity_type=model.entity_type,
            data=model.data,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def _get_model(self, entity_type: str, record_id: str) -> HostRecordModel | None:
        stmt = select(HostRecordModel).where(
            HostRecordModel.id == record_id,
            HostRecordModel.entity_type == entity_type,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id(self, entity_type: str, record_id: str) -> HostRecord | None:
        model = await self._get_model(entity_type, record_id)
        return self._to_entity(model) if model else None

    async def update(self, record: HostRecord) -> HostRecord:
        model = await self._get_model(record.entity_type, record.id)
        if model is None:
            raise ValueError(f"HostRecord {record.id} not found in database")
        model.data = record.data
        model.updated_at = record.updated_at
        await self._session.flush()
        return self._to_entity(model)
