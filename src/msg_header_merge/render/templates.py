"""Declarative header templates per item type.

Each item type maps to an ordered tuple of field descriptors, blank-line
markers and conditional groups. :func:`build_template` evaluates a table
against an item and yields the concrete :data:`HeaderTemplate` that the
formatter renders.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

import structlog

from msg_header_merge.exceptions import MissingRequiredFieldError, UnsupportedItemTypeError
from msg_header_merge.labels import LabelId, LabelTable
from msg_header_merge.models import (
    EMPTY_LINE,
    EmptyLine,
    HeaderField,
    HeaderItem,
    HeaderTemplate,
    Importance,
    ItemType,
    KeyedItem,
    RenderContext,
)
from msg_header_merge.render.addresses import format_attachments, format_recipients
from msg_header_merge.utils import format_date, format_percentage, join_values

logger = structlog.get_logger()

Predicate = Callable[[Any], bool]

LIST_SEPARATOR = "; "


class Fmt(str, Enum):
    """How a raw attribute value becomes header text."""

    TEXT = "text"
    DATE = "date"
    DATETIME = "datetime"
    RECIPIENTS = "recipients"
    ATTACHMENTS = "attachments"
    LIST = "list"
    IMPORTANCE = "importance"
    PERCENTAGE = "percentage"
    COMPLETED = "completed"
    SIGNER = "signer"


@dataclass(frozen=True)
class FieldSpec:
    """Descriptor of one header line.

    ``attr`` is a dotted attribute path on the item. ``required`` fields
    always render (an empty value when absent) and fail in strict mode;
    ``always`` fields render when absent without being required.
    ``blank_after`` appends a blank line only when the field is emitted.
    """

    label: LabelId
    attr: str
    fmt: Fmt = Fmt.TEXT
    required: bool = False
    always: bool = False
    encode: bool = True
    blank_after: bool = False
    when: Predicate | None = None


@dataclass(frozen=True)
class Blank:
    """Unconditional blank line."""


@dataclass(frozen=True)
class Group:
    """A block emitted wholly or not at all, depending on ``when``."""

    when: Predicate
    members: tuple[Spec, ...]


Spec = Union[FieldSpec, Blank, Group]

BLANK = Blank()


def _has_flag(item: Any) -> bool:
    return item.flag is not None


def _flag_complete(item: Any) -> bool:
    return bool(item.flag.complete)


def _flag_open(item: Any) -> bool:
    return not item.flag.complete


def _has_effort(item: Any) -> bool:
    return item.estimated_effort_text is not None or item.actual_effort_text is not None


def _email_template(signed: bool) -> tuple[Spec, ...]:
    specs: list[Spec] = [
        FieldSpec(LabelId.EMAIL_FROM, "sender", Fmt.RECIPIENTS, required=True, encode=False),
        FieldSpec(LabelId.EMAIL_SENT_ON, "sent_on", Fmt.DATETIME),
        FieldSpec(LabelId.EMAIL_TO, "to", Fmt.RECIPIENTS, required=True, encode=False),
        FieldSpec(LabelId.EMAIL_CC, "cc", Fmt.RECIPIENTS, encode=False),
        FieldSpec(LabelId.EMAIL_BCC, "bcc", Fmt.RECIPIENTS, encode=False),
    ]
    if signed:
        specs.append(FieldSpec(LabelId.EMAIL_SIGNED_BY, "signed_by", Fmt.SIGNER))
    specs += [
        FieldSpec(LabelId.EMAIL_SUBJECT, "subject", required=True),
        FieldSpec(LabelId.IMPORTANCE, "importance", Fmt.IMPORTANCE, blank_after=True),
        FieldSpec(LabelId.EMAIL_ATTACHMENTS, "attachments", Fmt.ATTACHMENTS, encode=False),
        BLANK,
        Group(
            when=_has_flag,
            members=(
                FieldSpec(LabelId.EMAIL_FOLLOW_UP, "flag.request"),
                FieldSpec(
                    LabelId.EMAIL_FOLLOW_UP_STATUS,
                    "flag.complete",
                    Fmt.COMPLETED,
                    when=_flag_complete,
                ),
                FieldSpec(
                    LabelId.TASK_DATE_COMPLETED,
                    "flag.complete_time",
                    Fmt.DATETIME,
                    when=_flag_complete,
                ),
                FieldSpec(LabelId.TASK_START_DATE, "flag.start_date", Fmt.DATETIME, when=_flag_open),
                FieldSpec(LabelId.TASK_DUE_DATE, "flag.due_date", Fmt.DATETIME, when=_flag_open),
                BLANK,
            ),
        ),
        FieldSpec(LabelId.EMAIL_CATEGORIES, "categories", Fmt.LIST, blank_after=True),
    ]
    return tuple(specs)


APPOINTMENT_TEMPLATE: tuple[Spec, ...] = (
    FieldSpec(LabelId.APPOINTMENT_SUBJECT, "subject", required=True),
    FieldSpec(LabelId.APPOINTMENT_LOCATION, "location"),
    BLANK,
    FieldSpec(LabelId.APPOINTMENT_START, "start", Fmt.DATETIME),
    FieldSpec(LabelId.APPOINTMENT_END, "end", Fmt.DATETIME),
    BLANK,
    FieldSpec(LabelId.APPOINTMENT_RECURRENCE_TYPE, "recurrence_type_text"),
    FieldSpec(LabelId.APPOINTMENT_RECURRENCE_PATTERN, "recurrence_pattern", blank_after=True),
    FieldSpec(LabelId.APPOINTMENT_CLIENT_INTENT, "client_intent_text"),
    FieldSpec(
        LabelId.APPOINTMENT_ORGANIZER, "organizer", Fmt.RECIPIENTS, required=True, encode=False
    ),
    FieldSpec(
        LabelId.APPOINTMENT_MANDATORY_PARTICIPANTS,
        "mandatory_participants",
        Fmt.RECIPIENTS,
        required=True,
        encode=False,
    ),
    FieldSpec(
        LabelId.APPOINTMENT_OPTIONAL_PARTICIPANTS,
        "optional_participants",
        Fmt.RECIPIENTS,
        encode=False,
    ),
    BLANK,
    FieldSpec(LabelId.EMAIL_CATEGORIES, "categories", Fmt.LIST, blank_after=True),
    FieldSpec(LabelId.IMPORTANCE, "importance", Fmt.IMPORTANCE, blank_after=True),
    FieldSpec(
        LabelId.APPOINTMENT_ATTACHMENTS,
        "attachments",
        Fmt.ATTACHMENTS,
        encode=False,
        blank_after=True,
    ),
)

CONTACT_TEMPLATE: tuple[Spec, ...] = (
    FieldSpec(LabelId.CONTACT_DISPLAY_NAME, "display_name"),
    FieldSpec(LabelId.CONTACT_SUR_NAME, "sur_name"),
    FieldSpec(LabelId.CONTACT_GIVEN_NAME, "given_name"),
    FieldSpec(LabelId.CONTACT_FUNCTION, "function"),
    FieldSpec(LabelId.CONTACT_DEPARTMENT, "department"),
    FieldSpec(LabelId.CONTACT_COMPANY, "company"),
    BLANK,
    FieldSpec(LabelId.CONTACT_WORK_ADDRESS, "work_address"),
    FieldSpec(LabelId.CONTACT_HOME_ADDRESS, "home_address"),
    FieldSpec(LabelId.CONTACT_OTHER_ADDRESS, "other_address"),
    FieldSpec(LabelId.CONTACT_INSTANT_MESSAGING_ADDRESS, "instant_messaging_address"),
    BLANK,
    FieldSpec(LabelId.CONTACT_BUSINESS_TELEPHONE, "business_telephone_number"),
    FieldSpec(LabelId.CONTACT_BUSINESS_TELEPHONE_2, "business_telephone_number_2"),
    FieldSpec(LabelId.CONTACT_ASSISTANT_TELEPHONE, "assistant_telephone_number"),
    FieldSpec(LabelId.CONTACT_COMPANY_MAIN_TELEPHONE, "company_main_telephone_number"),
    FieldSpec(LabelId.CONTACT_HOME_TELEPHONE, "home_telephone_number"),
    FieldSpec(LabelId.CONTACT_HOME_TELEPHONE_2, "home_telephone_number_2"),
    FieldSpec(LabelId.CONTACT_CELLULAR_TELEPHONE, "cellular_telephone_number"),
    FieldSpec(LabelId.CONTACT_CAR_TELEPHONE, "car_telephone_number"),
    FieldSpec(LabelId.CONTACT_RADIO_TELEPHONE, "radio_telephone_number"),
    FieldSpec(LabelId.CONTACT_BEEPER_TELEPHONE, "beeper_telephone_number"),
    FieldSpec(LabelId.CONTACT_CALLBACK_TELEPHONE, "callback_telephone_number"),
    FieldSpec(LabelId.CONTACT_OTHER_TELEPHONE, "other_telephone_number"),
    FieldSpec(LabelId.CONTACT_PRIMARY_TELEPHONE, "primary_telephone_number"),
    FieldSpec(LabelId.CONTACT_TELEX, "telex_number"),
    FieldSpec(LabelId.CONTACT_TEXT_TELEPHONE, "text_telephone"),
    FieldSpec(LabelId.CONTACT_ISDN, "isdn_number"),
    FieldSpec(LabelId.CONTACT_PRIMARY_FAX, "primary_fax_number"),
    FieldSpec(LabelId.CONTACT_BUSINESS_FAX, "business_fax_number"),
    FieldSpec(LabelId.CONTACT_HOME_FAX, "home_fax_number"),
    BLANK,
    FieldSpec(LabelId.CONTACT_EMAIL_1_ADDRESS, "email_1_address"),
    FieldSpec(LabelId.CONTACT_EMAIL_1_DISPLAY_NAME, "email_1_display_name"),
    FieldSpec(LabelId.CONTACT_EMAIL_2_ADDRESS, "email_2_address"),
    FieldSpec(LabelId.CONTACT_EMAIL_2_DISPLAY_NAME, "email_2_display_name"),
    FieldSpec(LabelId.CONTACT_EMAIL_3_ADDRESS, "email_3_address"),
    FieldSpec(LabelId.CONTACT_EMAIL_3_DISPLAY_NAME, "email_3_display_name"),
    BLANK,
    FieldSpec(LabelId.CONTACT_BIRTHDAY, "birthday", Fmt.DATE),
    FieldSpec(LabelId.CONTACT_WEDDING_ANNIVERSARY, "wedding_anniversary", Fmt.DATE),
    FieldSpec(LabelId.CONTACT_SPOUSE_NAME, "spouse_name"),
    FieldSpec(LabelId.CONTACT_PROFESSION, "profession"),
    FieldSpec(LabelId.CONTACT_ASSISTANT_NAME, "assistant_name"),
    FieldSpec(LabelId.CONTACT_WEB_PAGE, "web_page"),
    BLANK,
    BLANK,
)

TASK_TEMPLATE: tuple[Spec, ...] = (
    FieldSpec(LabelId.TASK_SUBJECT, "subject", required=True),
    FieldSpec(LabelId.TASK_START_DATE, "start_date", Fmt.DATETIME),
    FieldSpec(LabelId.TASK_DUE_DATE, "due_date", Fmt.DATETIME),
    FieldSpec(LabelId.IMPORTANCE, "importance", Fmt.IMPORTANCE, blank_after=True),
    BLANK,
    FieldSpec(LabelId.TASK_STATUS, "status_text"),
    FieldSpec(LabelId.TASK_PERCENTAGE_COMPLETE, "percentage_complete", Fmt.PERCENTAGE),
    BLANK,
    Group(
        when=_has_effort,
        members=(
            FieldSpec(LabelId.TASK_ESTIMATED_EFFORT, "estimated_effort_text", always=True),
            FieldSpec(LabelId.TASK_ACTUAL_EFFORT, "actual_effort_text", always=True),
            BLANK,
        ),
    ),
    FieldSpec(LabelId.TASK_OWNER, "owner", blank_after=True),
    FieldSpec(LabelId.TASK_CONTACTS, "contacts", Fmt.LIST),
    FieldSpec(LabelId.EMAIL_CATEGORIES, "categories", Fmt.LIST),
    FieldSpec(LabelId.TASK_COMPANIES, "companies", Fmt.LIST),
    FieldSpec(LabelId.TASK_BILLING_INFORMATION, "billing_information"),
    FieldSpec(LabelId.TASK_MILEAGE, "mileage"),
    FieldSpec(
        LabelId.APPOINTMENT_ATTACHMENTS,
        "attachments",
        Fmt.ATTACHMENTS,
        encode=False,
        blank_after=True,
    ),
    BLANK,
)

TEMPLATES: dict[ItemType, tuple[Spec, ...]] = {
    ItemType.EMAIL: _email_template(signed=False),
    ItemType.SIGNED_EMAIL: _email_template(signed=True),
    ItemType.APPOINTMENT: APPOINTMENT_TEMPLATE,
    ItemType.CONTACT: CONTACT_TEMPLATE,
    ItemType.TASK: TASK_TEMPLATE,
}

# Labels that never head a line but still widen the e-mail label column.
_EMAIL_WIDTH_LABELS = (LabelId.EMAIL_FOLLOW_UP_FLAG, LabelId.FOLLOW_UP_COMPLETED_TEXT)

WIDTH_ONLY_LABELS: dict[ItemType, tuple[LabelId, ...]] = {
    ItemType.EMAIL: _EMAIL_WIDTH_LABELS,
    ItemType.SIGNED_EMAIL: _EMAIL_WIDTH_LABELS,
}


def _resolve(item: Any, path: str) -> Any:
    value = item
    for part in path.split("."):
        if value is None:
            return None
        value = getattr(value, part)
    return value


def _importance_text(value: Any, labels: LabelTable) -> str | None:
    if value is None:
        return None
    if isinstance(value, Importance):
        return {
            Importance.LOW: labels[LabelId.IMPORTANCE_LOW_TEXT],
            Importance.NORMAL: labels[LabelId.IMPORTANCE_NORMAL_TEXT],
            Importance.HIGH: labels[LabelId.IMPORTANCE_HIGH_TEXT],
        }[value]
    return str(value)


def _format_value(
    spec: FieldSpec,
    item: Any,
    context: RenderContext,
    labels: LabelTable,
) -> str | None:
    raw = _resolve(item, spec.attr)

    if spec.fmt == Fmt.TEXT:
        return None if raw is None else str(raw)
    if spec.fmt == Fmt.DATE:
        return format_date(raw, labels.date_format)
    if spec.fmt == Fmt.DATETIME:
        return format_date(raw, labels.date_time_format)
    if spec.fmt == Fmt.RECIPIENTS:
        return format_recipients(raw, context)
    if spec.fmt == Fmt.ATTACHMENTS:
        return format_attachments(raw, context)
    if spec.fmt == Fmt.LIST:
        return join_values(raw, LIST_SEPARATOR)
    if spec.fmt == Fmt.IMPORTANCE:
        return _importance_text(raw, labels)
    if spec.fmt == Fmt.PERCENTAGE:
        return None if raw is None else format_percentage(raw)
    if spec.fmt == Fmt.COMPLETED:
        return labels[LabelId.FOLLOW_UP_COMPLETED_TEXT] if raw else None
    if spec.fmt == Fmt.SIGNER:
        if raw is None:
            return None
        signed_on = format_date(item.signed_on, labels.date_time_format)
        if signed_on is None:
            return str(raw)
        return f"{raw} {labels[LabelId.SIGNED_BY_ON]} {signed_on}"

    raise ValueError(f"Unknown field format: {spec.fmt}")


def _evaluate(
    specs: tuple[Spec, ...],
    item: Any,
    context: RenderContext,
    labels: LabelTable,
    strict: bool,
) -> Iterator[HeaderField | EmptyLine]:
    for spec in specs:
        if isinstance(spec, Blank):
            yield EMPTY_LINE
            continue

        if isinstance(spec, Group):
            if spec.when(item):
                yield from _evaluate(spec.members, item, context, labels, strict)
            continue

        if spec.when is not None and not spec.when(item):
            continue

        label = labels[spec.label]
        value = _format_value(spec, item, context, labels)
        always = spec.required or spec.always

        if not value:
            if spec.required and strict:
                raise MissingRequiredFieldError(label)
            if not always:
                continue

        yield HeaderField(label=label, value=value or "", encode=spec.encode, always=always)
        if spec.blank_after:
            yield EMPTY_LINE


def _keyed_template(item: KeyedItem) -> HeaderTemplate:
    fields: list[HeaderField | EmptyLine] = [
        HeaderField(label=str(key), value=str(value), encode=False)
        for key, value in item.values.items()
        if value is not None
    ]
    fields += [EMPTY_LINE, EMPTY_LINE]
    return tuple(fields)


def _template_for(item_type: ItemType) -> tuple[Spec, ...]:
    try:
        return TEMPLATES[item_type]
    except KeyError as exc:
        raise UnsupportedItemTypeError(f"No header template for item type {item_type.value!r}") from exc


def _item_type_of(item: Any) -> ItemType:
    if not isinstance(item, HeaderItem):
        raise UnsupportedItemTypeError(f"Unsupported item: {type(item).__name__}")
    return item.item_type


def _spec_labels(specs: tuple[Spec, ...]) -> Iterator[LabelId]:
    for spec in specs:
        if isinstance(spec, FieldSpec):
            yield spec.label
        elif isinstance(spec, Group):
            yield from _spec_labels(spec.members)


def template_labels(item_type: ItemType, labels: LabelTable) -> tuple[str, ...]:
    """Return the labels that size the text label column for ``item_type``.

    This is every label the template can emit, in order, followed by the
    extra e-mail follow-up texts that take part in the width.

    Generic keyed items have no fixed label set and return an empty tuple.
    """
    if item_type == ItemType.GENERIC:
        return ()
    label_ids = [*_spec_labels(_template_for(item_type)), *WIDTH_ONLY_LABELS.get(item_type, ())]
    return tuple(labels[label_id] for label_id in label_ids)


def build_template(
    item: HeaderItem,
    context: RenderContext,
    labels: LabelTable,
    strict: bool = False,
) -> HeaderTemplate:
    """Build the ordered header template for ``item``.

    Args:
        item: The item record to describe.
        context: Content-type mode of the render.
        labels: Localized label table.
        strict: Raise for missing required fields instead of rendering them empty.

    Returns:
        HeaderTemplate: Fields and blank-line markers in display order.

    Raises:
        UnsupportedItemTypeError: If the item type has no template.
        MissingRequiredFieldError: In strict mode, for an absent required field.
    """
    item_type = _item_type_of(item)

    if item_type == ItemType.GENERIC:
        template = _keyed_template(item)  # type: ignore[arg-type]
    else:
        specs = _template_for(item_type)
        template = tuple(_evaluate(specs, item, context, labels, strict))

    logger.debug(
        "header_template_built",
        item_type=item_type.value,
        entry_count=len(template),
        content_is_html=context.content_is_html,
    )
    return template
