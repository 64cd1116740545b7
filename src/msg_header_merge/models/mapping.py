"""Helpers for translating string-keyed metadata maps into item records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pydantic

from msg_header_merge.exceptions import UnsupportedItemTypeError, ValidationError
from msg_header_merge.models.items import (
    AppointmentItem,
    ContactItem,
    EmailItem,
    HeaderItem,
    ItemType,
    KeyedItem,
    TaskItem,
)


def parse_item_type(value: str | ItemType) -> ItemType:
    """Return the :class:`ItemType` named by ``value``.

    Raises:
        UnsupportedItemTypeError: If ``value`` names no known item type.
    """
    if isinstance(value, ItemType):
        return value
    try:
        return ItemType(str(value).strip().lower())
    except ValueError as exc:
        raise UnsupportedItemTypeError(f"Unsupported item type: {value!r}") from exc


def item_from_mapping(item_type: str | ItemType, mapping: Mapping[str, Any]) -> HeaderItem:
    """Validate a string-keyed metadata map into the typed record for ``item_type``.

    Args:
        item_type: Item type name or enum member.
        mapping: Metadata keyed by the fixed naming convention (``"Subject"``,
            ``"EmailSender"``...). Python field names are accepted too.

    Returns:
        HeaderItem: The validated item record.

    Raises:
        UnsupportedItemTypeError: If the item type is unknown.
        ValidationError: If a value cannot be coerced to its field type.
    """
    kind = parse_item_type(item_type)

    if kind == ItemType.GENERIC:
        return KeyedItem(values=dict(mapping))

    data = dict(mapping)
    try:
        if kind in (ItemType.EMAIL, ItemType.SIGNED_EMAIL):
            if kind == ItemType.SIGNED_EMAIL:
                if data.get("IsSigned") is None and data.get("is_signed") is None:
                    data["IsSigned"] = True
            return EmailItem.model_validate(data)
        if kind == ItemType.APPOINTMENT:
            return AppointmentItem.model_validate(data)
        if kind == ItemType.CONTACT:
            return ContactItem.model_validate(data)
        if kind == ItemType.TASK:
            return TaskItem.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Invalid {kind.value} metadata: {exc}") from exc

    raise UnsupportedItemTypeError(f"Unsupported item type: {kind.value!r}")
