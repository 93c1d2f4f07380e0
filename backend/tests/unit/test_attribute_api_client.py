"""Unit tests for the AttributeApiClient."""

import json

import httpx
import pytest

from app.application.services.attribute_editor import AttributeEditor, SaveOutcome
from app.domain.entities import AttributeCatalog, AttributeValueRecord, FieldRef, FieldType
from app.domain.exceptions import AttributeGatewayError
from app.infrastructure.dependencies import build_attribute_api_client
from app.infrastructure.http import AttributeApiClient


BASE_URL = "http://test/api/v1"


# ── Helpers ──


def _client(handler) -> AttributeApiClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AttributeApiClient(BASE_URL, "order", http_client=http_client)


def _fixed(status_code: int = 200, body=None) -> AttributeApiClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return _client(handler)


TEMPLATES = [
    {
        "id": "size-template",
        "title": "Size",
        "mapto": "order",
        "children": [
            {"id": "f-size", "title": "Size", "type": "select"},
            {"id": "f-extras", "title": "Extras", "type": "checkbox"},
            {"id": "f-note", "title": "Note", "type": "textarea"},
        ],
    }
]


# ── Search ──


@pytest.mark.asyncio
async def test_search_sends_term_and_field_and_maps_records():
    """Search hits become AttributeValueRecords tied to the queried field."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={
            "success": "success",
            "data": [{"id": "m-1", "key": "Red", "value": "#ff0000", "attribute_id": "f-color"}],
        })

    result = await _client(handler).search_attribute_meta("re", "f-color")

    assert seen[0].method == "GET"
    assert seen[0].url.path == "/api/v1/attribute-meta/search"
    assert seen[0].url.params["term"] == "re"
    assert seen[0].url.params["attribute_id"] == "f-color"
    assert result.ok
    assert result.data == [
        AttributeValueRecord(
            id="m-1", key="Red", value="#ff0000", attribute_id="f-color",
            created_at=result.data[0].created_at,
        )
    ]


@pytest.mark.asyncio
async def test_search_error_envelope_is_not_ok():
    result = await _fixed(200, {"success": "error", "message": "bad field"}).search_attribute_meta("x", "f")

    assert result.ok is False
    assert result.message == "bad field"


@pytest.mark.asyncio
@pytest.mark.parametrize("data", [5, "red", {"id": "m-1"}])
async def test_search_with_non_list_data_is_failed_result(data):
    result = await _fixed(200, {"success": "success", "data": data}).search_attribute_meta("x", "f")

    assert result.ok is False
    assert result.data is None


@pytest.mark.asyncio
async def test_editor_search_survives_malformed_search_response():
    editor = AttributeEditor(
        AttributeCatalog([], mapto="order"),
        meta_search=_fixed(200, {"success": "success", "data": 5}),
        record_gateway=_fixed(200, {"success": "success"}),
        confirm=lambda _: True,
    )

    assert await editor.search("x", "f-color") == []
    assert editor.search_loading is False
    assert editor.notices[-1].message == "Failed to search attribute values."


@pytest.mark.asyncio
async def test_http_error_status_becomes_failed_result():
    """A non-200 response still decodes to an envelope carrying the detail."""
    result = await _fixed(422, {"detail": "attribute_id required"}).search_attribute_meta("x", "")

    assert result.ok is False
    assert result.message == "attribute_id required"


@pytest.mark.asyncio
async def test_transport_error_raises_gateway_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AttributeGatewayError) as exc_info:
        await _client(handler).search_attribute_meta("x", "f")

    assert exc_info.value.operation == "search_attribute_meta"


@pytest.mark.asyncio
async def test_non_json_body_raises_gateway_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>Bad gateway</html>")

    with pytest.raises(AttributeGatewayError) as exc_info:
        await _client(handler).update_record("o-1", {"data": "[]"})

    assert exc_info.value.status_code == 502


# ── Records ──


@pytest.mark.asyncio
async def test_update_record_puts_payload_to_record_path():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": "success", "message": "Order attributes updated"})

    result = await _client(handler).update_record("o 1", {"data": "[]"})

    assert result.ok
    assert seen[0].method == "PUT"
    assert seen[0].url.raw_path == b"/api/v1/records/order/o%201"
    assert json.loads(seen[0].content) == {"data": "[]"}


@pytest.mark.asyncio
async def test_fetch_record_data_missing_record_raises():
    with pytest.raises(AttributeGatewayError) as exc_info:
        await _fixed(404, {"detail": "Order with id 'x' not found"}).fetch_record_data("x")

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_fetch_catalog_parses_field_types():
    catalog = await _fixed(200, TEMPLATES).fetch_catalog()

    template = catalog.get("size-template")
    assert catalog.mapto == "order"
    assert [d.type for d in template.children] == [
        FieldType.SELECT, FieldType.CHECKBOX, FieldType.TEXT,
    ]


# ── Editor wiring ──


@pytest.mark.asyncio
async def test_open_editor_loads_record_and_saves_through_client():
    """The client doubles as both gateway ports of the editor it opens."""
    stored = json.dumps([{"id": "g1", "title": "Shipping", "attributes": []}])
    puts: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/api/v1/attributes":
            assert request.url.params["mapto"] == "order"
            return httpx.Response(200, json=TEMPLATES)
        if path == "/api/v1/records/order/o-1" and request.method == "GET":
            return httpx.Response(200, json={"id": "o-1", "entity_type": "order", "data": stored})
        if path == "/api/v1/records/order/o-1" and request.method == "PUT":
            puts.append(json.loads(request.content))
            return httpx.Response(200, json={"success": "success"})
        if path == "/api/v1/attribute-meta/search":
            return httpx.Response(200, json={
                "success": "success",
                "data": [{"id": "m-9", "key": "Large", "value": "L"}],
            })
        return httpx.Response(404, json={"detail": "Not Found"})

    editor = await _client(handler).open_editor("o-1", confirm=lambda _: True)

    assert editor.host_id == "o-1"
    assert editor.groups[0].title == "Shipping"

    editor.select_attribute_for_group("g1", "size-template")
    editor.add_row("g1", "size-template")
    hits = await editor.search("lar", "f-size")
    editor.select_search_result(FieldRef("g1", "size-template", 0, 0), hits[0])

    assert await editor.save() == SaveOutcome.SAVED
    saved = json.loads(puts[0]["data"])
    assert saved[0]["attributes"][0]["children"][0][0]["value"] == {
        "id": "m-9", "title": "Large", "value": "L",
    }


def test_build_attribute_api_client_uses_settings():
    client = build_attribute_api_client("user")

    assert client.entity_type == "user"
    assert isinstance(client, AttributeApiClient)
