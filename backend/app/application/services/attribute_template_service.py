"""Application service for the read-only attribute definition store."""

from app.application.interfaces import AttributeTemplateRepository
from app.domain.entities import AttributeCatalog, AttributeTemplate
from app.domain.exceptions import EntityNotFoundError


class AttributeTemplateService:
    """Lists templates and builds per-host-kind catalogs for the editor."""

    def __init__(self, repository: AttributeTemplateRepository):
        self._repository = repository

    async def get_template(self, template_id: str) -> AttributeTemplate:
        template = await self._repository.get_by_id(template_id)
        if template is None:
            raise EntityNotFoundError("AttributeTemplate", template_id)
        return template

    async def list_templates(self, mapto: str | None = None) -> list[AttributeTemplate]:
        return await self._repository.get_all(mapto=mapto)

    async def build_catalog(self, mapto: str) -> AttributeCatalog:
        return AttributeCatalog(await self._repository.get_all(mapto=mapto), mapto=mapto)
