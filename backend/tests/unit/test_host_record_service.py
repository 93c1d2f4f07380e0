"""Unit tests for HostRecordService — uses an in-memory fake repository."""

import json

import pytest

from app.application.interfaces import HostRecordRepository
from app.application.services.host_record_service import HostRecordService
from app.domain.entities import HostRecord
from app.domain.exceptions import EntityNotFoundError, InvalidDocumentError


class FakeHostRecordRepository(HostRecordRepository):
    """In-memory implementation of the HostRecordRepository port."""

    def __init__(self):
        self._store: dict[tuple[str, str], HostRecord] = {}
        self.updates = 0

    def add(self, record: HostRecord) -> HostRecord:
        self._store[(record.entity_type, record.id)] = record
        return record

    async def get_by_id(self, entity_type: str, record_id: str) -> HostRecord | None:
        return self._store.get((entity_type, record_id))

    async def update(self, record: HostRecord) -> HostRecord:
        self.updates += 1
        self._store[(record.entity_type, record.id)] = record
        return record


GROUPS = json.dumps([{"id": "g1", "title": "Shipping", "attributes": []}])


@pytest.fixture
def repo():
    return FakeHostRecordRepository()


@pytest.fixture
def service(repo):
    return HostRecordService(repo)


@pytest.mark.asyncio
async def test_get_record(service, repo):
    """Existing records are returned as stored."""
    repo.add(HostRecord(entity_type="order", id="o-1", data=GROUPS))

    record = await service.get_record("order", "o-1")

    assert record.data == GROUPS


@pytest.mark.asyncio
async def test_get_record_wrong_entity_type_not_found(service, repo):
    """An order id looked up as a user is not found."""
    repo.add(HostRecord(entity_type="order", id="o-1"))

    with pytest.raises(EntityNotFoundError) as exc_info:
        await service.get_record("user", "o-1")

    assert exc_info.value.entity_type == "User"


@pytest.mark.asyncio
async def test_update_data_stores_text_verbatim(service, repo):
    """The document is kept exactly as sent, including whitespace."""
    record = repo.add(HostRecord(entity_type="order", id="o-1"))
    before = record.updated_at
    data = '[ {"id": "g1", "title": "Shipping", "attributes": []} ]'

    saved = await service.update_data("order", "o-1", data)

    assert saved.data == data
    assert saved.updated_at >= before
    assert repo.updates == 1


@pytest.mark.asyncio
async def test_update_data_accepts_legacy_list(service, repo):
    """A flat legacy instance list is still a readable document."""
    repo.add(HostRecord(entity_type="user", id="u-1"))
    legacy = json.dumps([{"id": "t", "title": "T", "children": []}])

    saved = await service.update_data("user", "u-1", legacy)

    assert saved.data == legacy


@pytest.mark.asyncio
async def test_update_data_accepts_numeric_field_values(service, repo):
    """Scalar values written by other clients do not make a document unreadable."""
    repo.add(HostRecord(entity_type="order", id="o-1"))
    data = json.dumps([{
        "id": "g1",
        "title": "Shipping",
        "attributes": [{"id": "t", "title": "T", "children": [[{"id": "f", "title": "Qty", "value": 42}]]}],
    }])

    saved = await service.update_data("order", "o-1", data)

    assert saved.data == data
    assert repo.updates == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("data", ["not json", '{"id": "g1"}', '"text"', '[{"attributes": 5}]'])
async def test_update_data_rejects_unreadable_documents(service, repo, data):
    """Non-array and malformed documents never reach the repository."""
    repo.add(HostRecord(entity_type="order", id="o-1"))

    with pytest.raises(InvalidDocumentError):
        await service.update_data("order", "o-1", data)

    assert repo.updates == 0


@pytest.mark.asyncio
async def test_update_data_missing_record(service):
    with pytest.raises(EntityNotFoundError):
        await service.update_data("order", "missing", GROUPS)


@pytest.mark.asyncio
async def test_load_groups_parses_document(service, repo):
    repo.add(HostRecord(entity_type="order", id="o-1", data=GROUPS))

    groups, parse_error = await service.load_groups("order", "o-1")

    assert [g.title for g in groups] == ["Shipping"]
    assert parse_error is False


@pytest.mark.asyncio
async def test_load_groups_flags_unreadable_data(service, repo):
    repo.add(HostRecord(entity_type="order", id="o-1", data="[{oops"))

    groups, parse_error = await service.load_groups("order", "o-1")

    assert groups == ()
    assert parse_error is True


@pytest.mark.asyncio
async def test_load_groups_empty_record(service, repo):
    repo.add(HostRecord(entity_type="order", id="o-1"))

    groups, parse_error = await service.load_groups("order", "o-1")

    assert groups == ()
    assert parse_error is False
