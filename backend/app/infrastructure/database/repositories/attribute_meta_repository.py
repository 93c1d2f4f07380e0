"""Concrete repository implementation for attribute metadata backed by SQLAlchemy."""

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import AttributeMetaRepository
from app.domain.entities import AttributeValueRecord
from app.infrastructure.database.models import AttributeMetaModel


class SQLAlchemyAttributeMetaRepository(AttributeMetaRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AttributeMetaModel) -> AttributeValueRecord:
        return AttributeValueRecord(
            id=model.id,
            key=model.key,
            value=model.value,
            attribute_id=model.attribute_id,
            created_at=model.created_at,
        )

    async def search(
        self,
        attribute_id: str,
        term: str = "",
        *,
        limit: int = 50,
    ) -> list[AttributeValueRecord]:
        stmt = select(AttributeMetaModel).where(
            AttributeMetaModel.attribute_id == attribute_id
        )
        if term:
            pattern = f"%{term}%"
            stmt = stmt.where(
                or_(
                    AttributeMetaModel.key.ilike(pattern),
                    AttributeMetaModel.value.ilike(pattern),
                )
            )
        stmt = stmt.order_by(AttributeMetaModel.key).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
