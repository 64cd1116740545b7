"""Data models for msg-header-merge.

Item records are Pydantic models validated at the boundary; the per-render
header structures are frozen dataclasses.
"""

from .header import EMPTY_LINE, EmptyLine, HeaderField, HeaderTemplate, RenderContext
from .items import (
    Address,
    AppointmentItem,
    Attachment,
    ContactItem,
    EmailItem,
    FollowUpFlag,
    HeaderItem,
    Importance,
    ItemType,
    KeyedItem,
    MessageBody,
    TaskItem,
)
from .mapping import item_from_mapping, parse_item_type

__all__ = [
    "EMPTY_LINE",
    "Address",
    "AppointmentItem",
    "Attachment",
    "ContactItem",
    "EmailItem",
    "EmptyLine",
    "FollowUpFlag",
    "HeaderField",
    "HeaderItem",
    "HeaderTemplate",
    "Importance",
    "ItemType",
    "KeyedItem",
    "MessageBody",
    "RenderContext",
    "TaskItem",
    "item_from_mapping",
    "parse_item_type",
]
