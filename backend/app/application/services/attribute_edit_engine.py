"""Pure structural edits over attribute-group snapshots.

Every operation takes a snapshot and returns a new one; the input is never
modified, so an older snapshot stays usable as a save baseline or rollback
point. Only the path from the root to the edited node is rebuilt.

Targets are addressed by group id, attribute (template) id, row index and
field index. A failed precondition raises an EditRejectedError subclass and
leaves nothing half-applied.
"""

import copy
import dataclasses
from collections.abc import Callable
from typing import TypeVar

from app.application.services.attribute_document_codec import new_group_id
from app.domain.entities import (
    AttributeCatalog,
    AttributeField,
    AttributeGroup,
    AttributeInstance,
    AttributeTemplate,
    BoundValue,
    FieldRef,
    FieldType,
    FieldValue,
    GroupSnapshot,
    MultiBoundValue,
    Row,
    TextValue,
)
from app.domain.exceptions import (
    BlankTitleError,
    DuplicateAttributeError,
    DuplicateValueError,
    EditRejectedError,
    EditTargetNotFoundError,
    TemplateNotFoundError,
    ValueNotFoundError,
)

T = TypeVar("T")

_MAX_ID_ATTEMPTS = 10


# ── Path helpers ─────────────────────────────────────────────────────


def _replace_at(items: tuple[T, ...], index: int, item: T) -> tuple[T, ...]:
    return items[:index] + (item,) + items[index + 1:]


def _group_index(groups: GroupSnapshot, group_id: str | int) -> int:
    for index, group in enumerate(groups):
        if group.id == group_id:
            return index
    raise EditTargetNotFoundError("Attribute group not found.")


def _update_group(
    groups: GroupSnapshot,
    group_id: str | int,
    change: Callable[[AttributeGroup], AttributeGroup],
) -> GroupSnapshot:
    index = _group_index(groups, group_id)
    return _replace_at(groups, index, change(groups[index]))


def _update_attribute(
    groups: GroupSnapshot,
    group_id: str | int,
    attribute_id: str | int,
    change: Callable[[AttributeInstance], AttributeInstance],
) -> GroupSnapshot:
    def on_group(group: AttributeGroup) -> AttributeGroup:
        for index, attribute in enumerate(group.attributes):
            if attribute.id == attribute_id:
                attributes = _replace_at(group.attributes, index, change(attribute))
                return dataclasses.replace(group, attributes=attributes)
        raise EditTargetNotFoundError("Attribute not found in this group.")

    return _update_group(groups, group_id, on_group)


def _require_row(attribute: AttributeInstance, row_index: int) -> Row:
    if not 0 <= row_index < len(attribute.children):
        raise EditTargetNotFoundError("Row not found.")
    return attribute.children[row_index]


def _update_field(
    groups: GroupSnapshot,
    ref: FieldRef,
    change: Callable[[AttributeField], AttributeField],
) -> GroupSnapshot:
    def on_attribute(attribute: AttributeInstance) -> AttributeInstance:
        row = _require_row(attribute, ref.row_index)
        if not 0 <= ref.field_index < len(row):
            raise EditTargetNotFoundError("Field not found.")
        new_row = _replace_at(row, ref.field_index, change(row[ref.field_index]))
        children = _replace_at(attribute.children, ref.row_index, new_row)
        return dataclasses.replace(attribute, children=children)

    return _update_attribute(groups, ref.group_id, ref.attribute_id, on_attribute)


def _clean_title(title: str | None) -> str:
    name = (title or "").strip()
    if not name:
        raise BlankTitleError("Group name cannot be empty.")
    return name


# ── Groups ───────────────────────────────────────────────────────────


def create_group(
    groups: GroupSnapshot,
    title: str | None,
    *,
    id_factory: Callable[[], str] = new_group_id,
) -> tuple[GroupSnapshot, AttributeGroup]:
    """Append an empty group; returns the new snapshot and the group."""
    name = _clean_title(title)
    taken = {group.id for group in groups}
    for _ in range(_MAX_ID_ATTEMPTS):
        group_id = id_factory()
        if group_id not in taken:
            break
    else:
        raise EditRejectedError("Could not allocate a unique group id.")

    group = AttributeGroup(id=group_id, title=name)
    return groups + (group,), group


def rename_group(groups: GroupSnapshot, group_id: str | int, title: str | None) -> GroupSnapshot:
    name = _clean_title(title)
    return _update_group(groups, group_id, lambda g: dataclasses.replace(g, title=name))


def delete_group(groups: GroupSnapshot, group_id: str | int) -> GroupSnapshot:
    index = _group_index(groups, group_id)
    return groups[:index] + groups[index + 1:]


# ── Attribute instances ──────────────────────────────────────────────


def _require_template(catalog: AttributeCatalog, template_id: str | int) -> AttributeTemplate:
    template = catalog.get(template_id)
    if template is None:
        raise TemplateNotFoundError("Attribute definition not found or has no fields.")
    return template


def select_attribute_for_group(
    groups: GroupSnapshot,
    group_id: str | int,
    template_id: str | int,
    catalog: AttributeCatalog,
) -> GroupSnapshot:
    """Bind a template into a group as a new, row-less attribute instance."""
    template = _require_template(catalog, template_id)

    def on_group(group: AttributeGroup) -> AttributeGroup:
        if group.find_attribute(template.id) is not None:
            raise DuplicateAttributeError(
                f'Attribute "{template.title}" already added to this group.'
            )
        instance = AttributeInstance(id=template.id, title=template.title)
        return dataclasses.replace(group, attributes=group.attributes + (instance,))

    return _update_group(groups, group_id, on_group)


def delete_attribute_instance(
    groups: GroupSnapshot, group_id: str | int, attribute_id: str | int
) -> GroupSnapshot:
    def on_group(group: AttributeGroup) -> AttributeGroup:
        if group.find_attribute(attribute_id) is None:
            raise EditTargetNotFoundError("Attribute not found in this group.")
        remaining = tuple(a for a in group.attributes if a.id != attribute_id)
        return dataclasses.replace(group, attributes=remaining)

    return _update_group(groups, group_id, on_group)


# ── Rows ─────────────────────────────────────────────────────────────


def new_row(template: AttributeTemplate) -> Row:
    """One field per definition; checkbox fields start as an empty selection."""
    return tuple(
        AttributeField(
            id=definition.id,
            title=definition.title,
            value=MultiBoundValue() if definition.type == FieldType.CHECKBOX else TextValue(),
        )
        for definition in template.children
    )


def add_row(
    groups: GroupSnapshot,
    group_id: str | int,
    attribute_id: str | int,
    catalog: AttributeCatalog,
) -> GroupSnapshot:
    row = new_row(_require_template(catalog, attribute_id))
    return _update_attribute(
        groups,
        group_id,
        attribute_id,
        lambda a: dataclasses.replace(a, children=a.children + (row,)),
    )


def duplicate_row(
    groups: GroupSnapshot, group_id: str | int, attribute_id: str | int, row_index: int
) -> GroupSnapshot:
    """Insert a deep copy of a row directly below it."""

    def on_attribute(attribute: AttributeInstance) -> AttributeInstance:
        clone = copy.deepcopy(_require_row(attribute, row_index))
        children = (
            attribute.children[: row_index + 1] + (clone,) + attribute.children[row_index + 1:]
        )
        return dataclasses.replace(attribute, children=children)

    return _update_attribute(groups, group_id, attribute_id, on_attribute)


def delete_row(
    groups: GroupSnapshot, group_id: str | int, attribute_id: str | int, row_index: int
) -> GroupSnapshot:
    def on_attribute(attribute: AttributeInstance) -> AttributeInstance:
        _require_row(attribute, row_index)
        children = attribute.children[:row_index] + attribute.children[row_index + 1:]
        return dataclasses.replace(attribute, children=children)

    return _update_attribute(groups, group_id, attribute_id, on_attribute)


# ── Fields ───────────────────────────────────────────────────────────


def set_field_value(groups: GroupSnapshot, ref: FieldRef, value: FieldValue) -> GroupSnapshot:
    """Replace a field's value wholesale."""
    return _update_field(groups, ref, lambda f: dataclasses.replace(f, value=value))


def _selection(field: AttributeField) -> MultiBoundValue:
    if isinstance(field.value, MultiBoundValue):
        return field.value
    return MultiBoundValue()


def add_checkbox_value(groups: GroupSnapshot, ref: FieldRef, item: BoundValue) -> GroupSnapshot:
    def on_field(field: AttributeField) -> AttributeField:
        selection = _selection(field)
        if selection.contains(item.id):
            raise DuplicateValueError("Already selected.")
        return dataclasses.replace(field, value=MultiBoundValue(selection.items + (item,)))

    return _update_field(groups, ref, on_field)


def remove_checkbox_value(groups: GroupSnapshot, ref: FieldRef, item: BoundValue) -> GroupSnapshot:
    def on_field(field: AttributeField) -> AttributeField:
        selection = _selection(field)
        if not selection.contains(item.id):
            raise ValueNotFoundError("Item not found to remove.")
        kept = tuple(v for v in selection.items if v.id != item.id)
        return dataclasses.replace(field, value=MultiBoundValue(kept))

    return _update_field(groups, ref, on_field)
