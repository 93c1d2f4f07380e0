"""Attribute editor session — one open attribute document for one host record.

Holds the current snapshot and the last-saved baseline, routes every edit
through the pure edit engine, and talks to the outside world only through
the gateway ports. Nothing raised by an edit, a search or a save reaches the
caller: failures become :class:`Notice` entries and leave the session in a
well-defined state.

State machine for saving::

    Clean ──edit──▶ Dirty ──save()──▶ Saving ──ok──▶ Clean (baseline = sent snapshot)
                                             └─fail─▶ Dirty (baseline untouched)
"""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from app.application.interfaces.attribute_gateway import AttributeMetaSearch, HostRecordGateway
from app.application.services import attribute_edit_engine as edits
from app.application.services.attribute_document_codec import (
    documents_differ,
    new_group_id,
    parse_document,
    serialize_document,
)
from app.domain.entities import (
    AttributeCatalog,
    AttributeGroup,
    AttributeTemplate,
    AttributeValueRecord,
    BoundValue,
    FieldRef,
    FieldType,
    FieldValue,
    GroupSnapshot,
    Notice,
    NoticeLevel,
    TextValue,
)
from app.domain.exceptions import AttributeGatewayError, DocumentParseError, EditRejectedError
from app.infrastructure.logging.colored_logger import EditorLogger, EditorStage

logger = logging.getLogger(__name__)
elog = EditorLogger("AttributeEditor")

Confirm = Callable[[str], bool]
NoticeHandler = Callable[[Notice], None]

_LOG_LEVELS = {
    NoticeLevel.SUCCESS: logging.INFO,
    NoticeLevel.INFO: logging.INFO,
    NoticeLevel.WARNING: logging.WARNING,
    NoticeLevel.ERROR: logging.ERROR,
}


class SaveOutcome(str, Enum):
    SAVED = "saved"
    UNCHANGED = "unchanged"
    IN_FLIGHT = "in_flight"
    REJECTED = "rejected"
    FAILED = "failed"


class AttributeEditor:
    """Edits the attribute groups of one order or user.

    ``confirm`` guards every destructive operation; it receives a prompt and
    must return True for the deletion to happen. ``on_notice`` is called for
    every notice in addition to it being appended to :attr:`notices`.
    """

    def __init__(
        self,
        catalog: AttributeCatalog,
        meta_search: AttributeMetaSearch,
        record_gateway: HostRecordGateway,
        confirm: Confirm,
        *,
        on_notice: NoticeHandler | None = None,
        request_timeout: float = 15.0,
        id_factory: Callable[[], str] = new_group_id,
    ):
        self._catalog = catalog
        self._meta_search = meta_search
        self._record_gateway = record_gateway
        self._confirm = confirm
        self._on_notice = on_notice
        self._request_timeout = request_timeout
        self._id_factory = id_factory
        self._label = catalog.mapto

        self._host_id: str | None = None
        self._groups: GroupSnapshot = ()
        self._baseline: GroupSnapshot = ()
        self._active_group_id: str | int | None = None
        self._saving = False
        self._stored_unreadable = False

        self._search_results: list[AttributeValueRecord] = []
        self._search_loading = False
        self._search_seq = 0

        self.notices: list[Notice] = []

    # ── State ────────────────────────────────────────────────────────

    @property
    def host_id(self) -> str | None:
        return self._host_id

    @property
    def groups(self) -> GroupSnapshot:
        return self._groups

    @property
    def baseline(self) -> GroupSnapshot:
        return self._baseline

    @property
    def active_group_id(self) -> str | int | None:
        return self._active_group_id

    @property
    def active_group(self) -> AttributeGroup | None:
        for group in self._groups:
            if group.id == self._active_group_id:
                return group
        return None

    @property
    def available_templates(self) -> list[AttributeTemplate]:
        """Templates that can still be added to the active group."""
        group = self.active_group
        if group is None:
            return []
        taken = {attribute.id for attribute in group.attributes}
        return [t for t in self._catalog.templates if t.id not in taken]

    @property
    def is_dirty(self) -> bool:
        return documents_differ(self._groups, self._baseline)

    @property
    def is_saving(self) -> bool:
        return self._saving

    @property
    def search_results(self) -> list[AttributeValueRecord]:
        return list(self._search_results)

    @property
    def search_loading(self) -> bool:
        return self._search_loading

    def field_type(self, ref: FieldRef) -> FieldType:
        """Editor kind of a field, read from its template; TEXT when unknown."""
        template = self._catalog.get(ref.attribute_id)
        if template is None:
            return FieldType.TEXT
        return template.field_type_at(ref.field_index)

    # ── Loading ──────────────────────────────────────────────────────

    def load(self, host_id: str | None, raw: str | None) -> None:
        """Decode a record's stored document and make it the clean baseline."""
        self._host_id = host_id
        elog.step_start(EditorStage.LOAD, f"Loading {self._label} attributes", record_id=host_id)
        try:
            groups = parse_document(raw, id_factory=self._id_factory)
        except DocumentParseError as exc:
            elog.step_error(EditorStage.LOAD, f"Could not parse {self._label} data", error=exc)
            self._notify(NoticeLevel.ERROR, f"Failed to load {self._label} attributes.")
            groups = ()
            self._stored_unreadable = True
        else:
            elog.step_complete(EditorStage.LOAD, "Document ready", groups=len(groups))
            self._stored_unreadable = False

        self._groups = groups
        self._baseline = groups
        self._active_group_id = groups[0].id if groups else None

    def revert(self) -> None:
        """Drop unsaved edits and return to the baseline."""
        self._groups = self._baseline
        if self.active_group is None:
            self._active_group_id = self._groups[0].id if self._groups else None

    # ── Groups ───────────────────────────────────────────────────────

    def select_group(self, group_id: str | int) -> bool:
        if not any(group.id == group_id for group in self._groups):
            self._notify(NoticeLevel.ERROR, "Attribute group not found.")
            return False
        self._active_group_id = group_id
        return True

    def create_group(self, title: str | None) -> AttributeGroup | None:
        """Append a group and make it active; blank titles are rejected."""
        try:
            groups, group = edits.create_group(self._groups, title, id_factory=self._id_factory)
        except EditRejectedError as exc:
            self._reject(exc)
            return None
        self._groups = groups
        self._active_group_id = group.id
        elog.detail("Group created", group_id=group.id, title=group.title)
        return group

    def rename_group(self, group_id: str | int, title: str | None) -> bool:
        return self._apply(edits.rename_group, group_id, title)

    def delete_group(self, group_id: str | int) -> bool:
        if not self._confirm("Are you sure you want to delete this group?"):
            return False
        if not self._apply(edits.delete_group, group_id):
            return False
        if self._active_group_id == group_id:
            self._active_group_id = self._groups[0].id if self._groups else None
        return True

    # ── Attribute instances & rows ───────────────────────────────────

    def select_attribute_for_group(self, group_id: str | int, template_id: str | int) -> bool:
        return self._apply(edits.select_attribute_for_group, group_id, template_id, self._catalog)

    def delete_attribute_instance(self, group_id: str | int, attribute_id: str | int) -> bool:
        title = self._attribute_title(group_id, attribute_id)
        prompt = f'Are you sure you want to remove the entire "{title}" attribute section from this group?'
        if not self._confirm(prompt):
            return False
        return self._apply(edits.delete_attribute_instance, group_id, attribute_id)

    def add_row(self, group_id: str | int, attribute_id: str | int) -> bool:
        return self._apply(edits.add_row, group_id, attribute_id, self._catalog)

    def duplicate_row(self, group_id: str | int, attribute_id: str | int, row_index: int) -> bool:
        return self._apply(edits.duplicate_row, group_id, attribute_id, row_index)

    def delete_row(self, group_id: str | int, attribute_id: str | int, row_index: int) -> bool:
        if not self._confirm("Are you sure you want to remove this row?"):
            return False
        return self._apply(edits.delete_row, group_id, attribute_id, row_index)

    # ── Fields ───────────────────────────────────────────────────────

    def set_field_value(self, ref: FieldRef, value: FieldValue | str) -> bool:
        if isinstance(value, str):
            value = TextValue(value)
        return self._apply(edits.set_field_value, ref, value)

    def add_checkbox_value(self, ref: FieldRef, item: BoundValue) -> bool:
        return self._apply(edits.add_checkbox_value, ref, item)

    def remove_checkbox_value(self, ref: FieldRef, item: BoundValue) -> bool:
        if not self._confirm("Are you sure you want to remove this item?"):
            return False
        return self._apply(edits.remove_checkbox_value, ref, item)

    # ── Search binding ───────────────────────────────────────────────

    async def search(self, term: str, field_definition_id: str | int) -> list[AttributeValueRecord]:
        """Search metadata values for a field and return the displayed results.

        Results are replaced, never merged. A response that arrives after a
        newer search was issued is dropped, so the displayed list always
        belongs to the latest request.
        """
        self._search_seq += 1
        request = self._search_seq
        self._search_loading = True
        self._search_results = []

        records: list[AttributeValueRecord] = []
        failure: str | None = None
        try:
            with elog.timed_step(
                EditorStage.SEARCH, "Searching attribute values",
                field=field_definition_id, term=term,
            ):
                result = await asyncio.wait_for(
                    self._meta_search.search_attribute_meta(term, field_definition_id),
                    timeout=self._request_timeout,
                )
        except (AttributeGatewayError, asyncio.TimeoutError):
            failure = "An error occurred during search."
        except Exception as exc:
            elog.step_error(EditorStage.SEARCH, "Search failed unexpectedly", error=exc)
            failure = "An error occurred during search."
        else:
            if result is not None and result.ok and isinstance(result.data, (list, tuple, type(None))):
                records = list(result.data or [])
            else:
                failure = "Failed to search attribute values."

        if request != self._search_seq:
            elog.detail("Dropping superseded search response", request=request, latest=self._search_seq)
            return self.search_results

        self._search_results = records
        self._search_loading = False
        if failure:
            self._notify(NoticeLevel.ERROR, failure)
        return self.search_results

    def select_search_result(self, ref: FieldRef, record: AttributeValueRecord) -> bool:
        """Bind a search hit: checkbox fields collect it, other fields take it wholesale."""
        bound = record.to_bound_value()
        if self.field_type(ref) == FieldType.CHECKBOX:
            return self.add_checkbox_value(ref, bound)
        return self.set_field_value(ref, bound)

    # ── Saving ───────────────────────────────────────────────────────

    async def save(self) -> SaveOutcome:
        """Send the current snapshot if it differs from the baseline.

        Only one save runs at a time; a request made while one is in flight
        is ignored.
        """
        if self._saving:
            elog.detail("Save already in flight, request ignored", record_id=self._host_id)
            return SaveOutcome.IN_FLIGHT
        if not self.is_dirty:
            return SaveOutcome.UNCHANGED
        if not self._host_id:
            self._notify(NoticeLevel.ERROR, f"{self._label.capitalize()} ID is missing.")
            return SaveOutcome.REJECTED
        if self._stored_unreadable and not self._confirm(
            f"The stored {self._label} attributes could not be read. "
            "Saving will replace them. Continue?"
        ):
            self._notify(NoticeLevel.WARNING, "Save cancelled; stored attributes left unchanged.")
            return SaveOutcome.REJECTED

        snapshot = self._groups
        payload = serialize_document(snapshot)
        self._saving = True
        try:
            with elog.timed_step(
                EditorStage.SAVE, f"Saving {self._label} attributes",
                record_id=self._host_id, size=len(payload),
            ):
                result = await asyncio.wait_for(
                    self._record_gateway.update_record(self._host_id, {"data": payload}),
                    timeout=self._request_timeout,
                )
        except (AttributeGatewayError, asyncio.TimeoutError):
            self._notify(NoticeLevel.ERROR, "An error occurred while saving.")
            return SaveOutcome.FAILED
        except Exception as exc:
            elog.step_error(EditorStage.SAVE, "Save failed unexpectedly", error=exc)
            self._notify(NoticeLevel.ERROR, "An error occurred while saving.")
            return SaveOutcome.FAILED
        finally:
            self._saving = False

        if result is None or not result.ok:
            self._notify(NoticeLevel.ERROR, f"Failed to update {self._label} attributes.")
            return SaveOutcome.FAILED

        self._baseline = snapshot
        self._stored_unreadable = False
        elog.step_complete(EditorStage.COMPLETE, "Baseline advanced", record_id=self._host_id)
        self._notify(NoticeLevel.SUCCESS, f"{self._label.capitalize()} attributes updated successfully")
        return SaveOutcome.SAVED

    # ── Internals ────────────────────────────────────────────────────

    def _apply(self, operation: Callable[..., GroupSnapshot], *args: Any) -> bool:
        try:
            groups = operation(self._groups, *args)
        except EditRejectedError as exc:
            self._reject(exc)
            return False
        self._groups = groups
        return True

    def _attribute_title(self, group_id: str | int, attribute_id: str | int) -> str:
        for group in self._groups:
            if group.id == group_id:
                attribute = group.find_attribute(attribute_id)
                if attribute is not None:
                    return attribute.title
        return str(attribute_id)

    def _reject(self, exc: EditRejectedError) -> None:
        elog.detail(f"Edit rejected: {exc.message}", kind=type(exc).__name__)
        self._notify(exc.level, exc.message)

    def _notify(self, level: NoticeLevel, message: str) -> None:
        notice = Notice(level=level, message=message)
        self.notices.append(notice)
        logger.log(_LOG_LEVELS[level], "[%s] %s", level.value, message)
        if self._on_notice is not None:
            self._on_notice(notice)
