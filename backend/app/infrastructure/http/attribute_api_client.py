"""Attribute API client — implements the editor's gateway ports over HTTP.

Talks to this backend's ``/api/v1`` attribute endpoints with httpx. Any
response the server produced is decoded into an :class:`ActionResult`;
transport failures, timeouts and unreadable bodies raise
:class:`AttributeGatewayError`.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.application.interfaces.attribute_gateway import (
    ActionResult,
    AttributeMetaSearch,
    HostRecordGateway,
)
from app.application.services.attribute_editor import AttributeEditor, Confirm, NoticeHandler
from app.domain.entities import (
    AttributeCatalog,
    AttributeFieldDefinition,
    AttributeTemplate,
    AttributeValueRecord,
    FieldType,
)
from app.domain.exceptions import AttributeGatewayError

logger = logging.getLogger(__name__)


class AttributeApiClient(AttributeMetaSearch, HostRecordGateway):
    """Infrastructure adapter — one client per host kind (``order`` or ``user``).

    Pass ``http_client`` to share a connection pool or to inject a mock
    transport; otherwise a short-lived client is created per call.
    """

    def __init__(
        self,
        base_url: str,
        entity_type: str = "order",
        *,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._entity_type = entity_type
        self._timeout = timeout
        self._http_client = http_client

    @property
    def entity_type(self) -> str:
        return self._entity_type

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(self, operation: str, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()
        should_close = self._http_client is None
        try:
            return await client.request(method, f"{self._base_url}{path}", **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise AttributeGatewayError(operation, str(exc) or type(exc).__name__) from exc
        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _decode(response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise AttributeGatewayError(
                operation, "Response body is not valid JSON", response.status_code
            ) from exc

    def _envelope(self, response: httpx.Response, operation: str) -> ActionResult:
        """Decode ``{success, data, message}``; error statuses become failed results."""
        body = self._decode(response, operation)
        if response.status_code != 200 or not isinstance(body, dict):
            detail = body.get("detail") if isinstance(body, dict) else None
            return ActionResult(
                success="error",
                message=str(detail) if detail else f"HTTP {response.status_code}",
            )
        return ActionResult(
            success=str(body.get("success", "error")),
            data=body.get("data"),
            message=body.get("message"),
        )

    def _record_path(self, record_id: str) -> str:
        return f"/records/{quote(self._entity_type, safe='')}/{quote(str(record_id), safe='')}"

    # ── Gateway ports ────────────────────────────────────────────────

    async def search_attribute_meta(
        self, term: str, field_definition_id: str | int
    ) -> ActionResult:
        operation = "search_attribute_meta"
        response = await self._request(
            operation, "GET", "/attribute-meta/search",
            params={"term": term, "attribute_id": str(field_definition_id)},
        )
        result = self._envelope(response, operation)
        if result.ok and not isinstance(result.data, (list, type(None))):
            logger.warning("Search response data is %s, not a list", type(result.data).__name__)
            return ActionResult(success="error", message="Malformed search response")
        if result.ok:
            result.data = [
                AttributeValueRecord(
                    id=item.get("id", ""),
                    key=item.get("key") or "",
                    value=item.get("value", ""),
                    attribute_id=field_definition_id,
                )
                for item in (result.data or [])
                if isinstance(item, dict)
            ]
        return result

    async def update_record(self, entity_id: str, payload: dict[str, str]) -> ActionResult:
        operation = "update_record"
        response = await self._request(
            operation, "PUT", self._record_path(entity_id), json=payload,
        )
        return self._envelope(response, operation)

    # ── Loading ──────────────────────────────────────────────────────

    async def fetch_catalog(self) -> AttributeCatalog:
        """Templates mapped to this client's host kind."""
        operation = "list_templates"
        response = await self._request(
            operation, "GET", "/attributes", params={"mapto": self._entity_type},
        )
        body = self._decode(response, operation)
        if response.status_code != 200 or not isinstance(body, list):
            raise AttributeGatewayError(operation, "Could not list attribute templates", response.status_code)
        templates = [
            AttributeTemplate(
                id=item["id"],
                title=item.get("title") or "",
                mapto=item.get("mapto") or self._entity_type,
                children=[
                    AttributeFieldDefinition(
                        id=child.get("id", ""),
                        title=child.get("title") or "",
                        type=FieldType.parse(child.get("type")),
                    )
                    for child in item.get("children") or []
                    if isinstance(child, dict)
                ],
            )
            for item in body
            if isinstance(item, dict) and "id" in item
        ]
        return AttributeCatalog(templates, mapto=self._entity_type)

    async def fetch_record_data(self, record_id: str) -> str | None:
        """Raw stored document of one record."""
        operation = "get_record"
        response = await self._request(operation, "GET", self._record_path(record_id))
        body = self._decode(response, operation)
        if response.status_code != 200 or not isinstance(body, dict):
            raise AttributeGatewayError(operation, f"Could not load record {record_id}", response.status_code)
        return body.get("data")

    async def open_editor(
        self,
        record_id: str,
        confirm: Confirm,
        *,
        on_notice: NoticeHandler | None = None,
    ) -> AttributeEditor:
        """Fetch the catalog and the record, and return a loaded editor wired to this client."""
        catalog = await self.fetch_catalog()
        raw = await self.fetch_record_data(record_id)
        editor = AttributeEditor(
            catalog,
            meta_search=self,
            record_gateway=self,
            confirm=confirm,
            on_notice=on_notice,
            request_timeout=self._timeout,
        )
        editor.load(record_id, raw)
        return editor
