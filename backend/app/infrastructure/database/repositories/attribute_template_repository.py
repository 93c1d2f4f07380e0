"""Concrete repository implementation for attribute templates backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import AttributeTemplateRepository
from app.domain.entities import AttributeFieldDefinition, AttributeTemplate, FieldType
from app.infrastructure.database.models import AttributeTemplateModel


class SQLAlchemyAttributeTemplateRepository(AttributeTemplateRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_definition(raw: dict[str, Any]) -> AttributeFieldDefinition:
        return AttributeFieldDefinition(
            id=raw.get("id", ""),
            title=raw.get("title") or "",
            type=FieldType.parse(raw.get("type")),
        )

    def _to_entity(self, model: AttributeTemplateModel) -> AttributeTemplate:
        """Map ORM model → domain entity; malformed children entries are skipped."""
        return AttributeTemplate(
            id=model.id,
            title=model.title,
            mapto=model.mapto,
            children=[
                self._to_definition(child)
                for child in (model.children or [])
                if isinstance(child, dict)
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def get_by_id(self, template_id: str) -> AttributeTemplate | None:
        model = await self._session.get(AttributeTemplateModel, template_id)
        return self._to_entity(model) if model else None

    async def get_all(self, *, mapto: str | None = None) -> list[AttributeTemplate]:
        stmt = select(AttributeTemplateModel)
        if mapto is not None:
            stmt = stmt.where(AttributeTemplateModel.mapto == mapto)
        stmt = stmt.order_by(AttributeTemplateModel.title)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
