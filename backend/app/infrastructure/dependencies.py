"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.application.services import (
    AttributeMetaService,
    AttributeTemplateService,
    HostRecordService,
)
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyAttributeMetaRepository,
    SQLAlchemyAttributeTemplateRepository,
    SQLAlchemyHostRecordRepository,
)
from app.infrastructure.http import AttributeApiClient


async def get_attribute_template_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AttributeTemplateService, None]:
    """Provides an AttributeTemplateService with its repository wired up."""
    repository = SQLAlchemyAttributeTemplateRepository(session)
    yield AttributeTemplateService(repository)


async def get_attribute_meta_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AttributeMetaService, None]:
    """Provides an AttributeMetaService using the configured search limit."""
    settings = get_settings()
    repository = SQLAlchemyAttributeMetaRepository(session)
    yield AttributeMetaService(repository, default_limit=settings.attribute_search_limit)


async def get_host_record_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[HostRecordService, None]:
    """Provides a HostRecordService instance with its repository wired up."""
    repository = SQLAlchemyHostRecordRepository(session)
    yield HostRecordService(repository)


def build_attribute_api_client(entity_type: str = "order") -> AttributeApiClient:
    """API client for the attribute editor, configured from settings."""
    settings = get_settings()
    return AttributeApiClient(
        base_url=settings.attribute_api_base_url,
        entity_type=entity_type,
        timeout=settings.attribute_request_timeout,
    )
