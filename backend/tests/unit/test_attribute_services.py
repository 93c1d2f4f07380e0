"""Unit tests for the attribute template and metadata services."""

import pytest

from app.application.interfaces import AttributeMetaRepository, AttributeTemplateRepository
from app.application.services.attribute_meta_service import AttributeMetaService
from app.application.services.attribute_template_service import AttributeTemplateService
from app.domain.entities import (
    AttributeFieldDefinition,
    AttributeTemplate,
    AttributeValueRecord,
    FieldType,
)
from app.domain.exceptions import EntityNotFoundError


# ── Fakes ──


class FakeAttributeTemplateRepository(AttributeTemplateRepository):
    def __init__(self, templates: list[AttributeTemplate]):
        self._templates = templates

    async def get_by_id(self, template_id: str) -> AttributeTemplate | None:
        return next((t for t in self._templates if t.id == template_id), None)

    async def get_all(self, *, mapto: str | None = None) -> list[AttributeTemplate]:
        return [t for t in self._templates if mapto is None or t.mapto == mapto]


class FakeAttributeMetaRepository(AttributeMetaRepository):
    def __init__(self, records: list[AttributeValueRecord]):
        self._records = records
        self.calls: list[tuple[str, str, int]] = []

    async def search(self, attribute_id, term="", *, limit=50):
        self.calls.append((attribute_id, term, limit))
        needle = term.lower()
        hits = [
            r for r in self._records
            if r.attribute_id == attribute_id
            and (needle in r.key.lower() or needle in str(r.value).lower())
        ]
        return hits[:limit]


TEMPLATES = [
    AttributeTemplate(
        id="size-template",
        title="Size",
        mapto="order",
        children=[AttributeFieldDefinition(id="f-size", title="Size", type=FieldType.SELECT)],
    ),
    AttributeTemplate(id="shoe-size", title="Shoe size", mapto="user"),
]

RECORDS = [
    AttributeValueRecord(id="m-1", key="Red", value="#ff0000", attribute_id="f-color"),
    AttributeValueRecord(id="m-2", key="Dark red", value="#8b0000", attribute_id="f-color"),
    AttributeValueRecord(id="m-3", key="Large", value="L", attribute_id="f-size"),
]


# ── AttributeTemplateService ──


@pytest.mark.asyncio
async def test_get_template():
    service = AttributeTemplateService(FakeAttributeTemplateRepository(TEMPLATES))

    template = await service.get_template("size-template")

    assert template.children[0].type == FieldType.SELECT


@pytest.mark.asyncio
async def test_get_template_not_found():
    service = AttributeTemplateService(FakeAttributeTemplateRepository(TEMPLATES))

    with pytest.raises(EntityNotFoundError):
        await service.get_template("nope")


@pytest.mark.asyncio
async def test_list_templates_filters_by_mapto():
    service = AttributeTemplateService(FakeAttributeTemplateRepository(TEMPLATES))

    assert len(await service.list_templates()) == 2
    assert [t.id for t in await service.list_templates("user")] == ["shoe-size"]


@pytest.mark.asyncio
async def test_build_catalog_only_offers_matching_host_kind():
    service = AttributeTemplateService(FakeAttributeTemplateRepository(TEMPLATES))

    catalog = await service.build_catalog("order")

    assert catalog.mapto == "order"
    assert len(catalog) == 1
    assert catalog.get("size-template") is not None
    assert catalog.get("shoe-size") is None


# ── AttributeMetaService ──


@pytest.mark.asyncio
async def test_search_strips_term_and_uses_default_limit():
    repo = FakeAttributeMetaRepository(RECORDS)
    service = AttributeMetaService(repo, default_limit=25)

    hits = await service.search("  red ", "f-color")

    assert [r.id for r in hits] == ["m-1", "m-2"]
    assert repo.calls == [("f-color", "red", 25)]


@pytest.mark.asyncio
async def test_search_blank_term_lists_all_values_of_field():
    service = AttributeMetaService(FakeAttributeMetaRepository(RECORDS))

    hits = await service.search("", "f-size")

    assert [r.id for r in hits] == ["m-3"]


@pytest.mark.asyncio
async def test_search_limit_is_capped():
    repo = FakeAttributeMetaRepository(RECORDS)
    service = AttributeMetaService(repo, max_limit=200)

    await service.search("red", "f-color", limit=1000)

    assert repo.calls[-1][2] == 200
