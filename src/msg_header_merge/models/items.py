"""Typed item records.

Each record accepts both Python field names and the fixed string-keyed
naming convention used by upstream message readers (``"Subject"``,
``"EmailSender"``, ``"RecurrenceTypeText"``...), so a loosely typed metadata
map is validated into a typed record at the boundary.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ItemType(str, Enum):
    """Item type enumeration."""

    EMAIL = "email"
    SIGNED_EMAIL = "signed_email"
    APPOINTMENT = "appointment"
    CONTACT = "contact"
    TASK = "task"
    GENERIC = "generic"


class Importance(str, Enum):
    """Importance level enumeration, rendered through the label table."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class Address(BaseModel):
    """A single sender or recipient."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    email: Optional[str] = Field(default=None, alias="Email", description="E-mail address")
    display_name: Optional[str] = Field(
        default=None, alias="DisplayName", description="Display name"
    )


class Attachment(BaseModel):
    """An attachment as it should be listed in the header."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    file_name: str = Field(alias="FileName", description="Attachment file name")
    size: Optional[int] = Field(default=None, ge=0, alias="Size", description="Size in bytes")
    href: Optional[str] = Field(
        default=None, alias="Href", description="Link target used when hyperlinks are enabled"
    )


# Pre-rendered strings are passed through verbatim, address lists are
# rendered for the active content type.
Recipients = Union[str, list[Address]]
AttachmentEntry = Union[str, Attachment]
ImportanceValue = Union[Importance, str]


class FollowUpFlag(BaseModel):
    """Follow-up flag attached to an e-mail."""

    model_config = ConfigDict(populate_by_name=True)

    request: Optional[str] = Field(default=None, alias="Request", description="Flag request text")
    complete: Optional[bool] = Field(
        default=None, alias="Complete", description="Whether the flag is done"
    )
    complete_time: Optional[datetime] = Field(default=None, alias="CompleteTime")
    start_date: Optional[datetime] = Field(default=None, alias="StartDate")
    due_date: Optional[datetime] = Field(default=None, alias="DueDate")


class MessageBody(BaseModel):
    """The raw body representations a message may carry."""

    html: Optional[str] = Field(default=None, description="HTML body")
    rtf: Optional[str] = Field(default=None, description="RTF body")
    text: Optional[str] = Field(default=None, description="Plain text body")


class HeaderItem(BaseModel):
    """Base class for every renderable item."""

    model_config = ConfigDict(populate_by_name=True)

    @property
    @abstractmethod
    def item_type(self) -> ItemType:
        """The item type selecting the header template."""


class EmailItem(HeaderItem):
    """E-mail metadata, optionally signed."""

    sender: Optional[Recipients] = Field(default=None, alias="EmailSender")
    sent_on: Optional[datetime] = Field(default=None, alias="SentOn")
    to: Optional[Recipients] = Field(default=None, alias="EmailRecipientsTo")
    cc: Optional[Recipients] = Field(default=None, alias="EmailRecipientsCc")
    bcc: Optional[Recipients] = Field(default=None, alias="EmailRecipientsBcc")
    is_signed: Optional[bool] = Field(default=None, alias="IsSigned")
    signed_by: Optional[str] = Field(default=None, alias="SignedBy")
    signed_on: Optional[datetime] = Field(default=None, alias="SignedOn")
    subject: Optional[str] = Field(default=None, alias="Subject")
    importance: Optional[ImportanceValue] = Field(default=None, alias="ImportanceText")
    attachments: Optional[list[AttachmentEntry]] = Field(default=None, alias="Attachments")
    flag: Optional[FollowUpFlag] = Field(default=None, alias="Flag")
    categories: Optional[list[str]] = Field(default=None, alias="Categories")

    @property
    def item_type(self) -> ItemType:
        return ItemType.SIGNED_EMAIL if self.is_signed else ItemType.EMAIL


class AppointmentItem(HeaderItem):
    """Appointment (meeting) metadata."""

    subject: Optional[str] = Field(default=None, alias="Subject")
    location: Optional[str] = Field(default=None, alias="Location")
    start: Optional[datetime] = Field(default=None, alias="Start")
    end: Optional[datetime] = Field(default=None, alias="End")
    recurrence_type_text: Optional[str] = Field(default=None, alias="RecurrenceTypeText")
    recurrence_pattern: Optional[str] = Field(default=None, alias="RecurrencePattern")
    client_intent_text: Optional[str] = Field(default=None, alias="ClientIntentText")
    organizer: Optional[Recipients] = Field(default=None, alias="EmailSender")
    mandatory_participants: Optional[Recipients] = Field(default=None, alias="EmailRecipientsTo")
    optional_participants: Optional[Recipients] = Field(default=None, alias="EmailRecipientsCc")
    categories: Optional[list[str]] = Field(default=None, alias="Categories")
    importance: Optional[ImportanceValue] = Field(default=None, alias="ImportanceText")
    attachments: Optional[list[AttachmentEntry]] = Field(default=None, alias="Attachments")

    @property
    def item_type(self) -> ItemType:
        return ItemType.APPOINTMENT


class ContactItem(HeaderItem):
    """Contact card metadata."""

    display_name: Optional[str] = Field(default=None, alias="DisplayName")
    sur_name: Optional[str] = Field(default=None, alias="SurName")
    given_name: Optional[str] = Field(default=None, alias="GivenName")
    function: Optional[str] = Field(default=None, alias="Function")
    department: Optional[str] = Field(default=None, alias="Department")
    company: Optional[str] = Field(default=None, alias="Company")

    work_address: Optional[str] = Field(default=None, alias="WorkAddress")
    home_address: Optional[str] = Field(default=None, alias="HomeAddress")
    other_address: Optional[str] = Field(default=None, alias="OtherAddress")
    instant_messaging_address: Optional[str] = Field(
        default=None, alias="InstantMessagingAddress"
    )

    business_telephone_number: Optional[str] = Field(default=None, alias="BusinessTelephoneNumber")
    business_telephone_number_2: Optional[str] = Field(
        default=None, alias="BusinessTelephoneNumber2"
    )
    assistant_telephone_number: Optional[str] = Field(
        default=None, alias="AssistantTelephoneNumber"
    )
    company_main_telephone_number: Optional[str] = Field(
        default=None, alias="CompanyMainTelephoneNumber"
    )
    home_telephone_number: Optional[str] = Field(default=None, alias="HomeTelephoneNumber")
    home_telephone_number_2: Optional[str] = Field(default=None, alias="HomeTelephoneNumber2")
    cellular_telephone_number: Optional[str] = Field(default=None, alias="CellularTelephoneNumber")
    car_telephone_number: Optional[str] = Field(default=None, alias="CarTelephoneNumber")
    radio_telephone_number: Optional[str] = Field(default=None, alias="RadioTelephoneNumber")
    beeper_telephone_number: Optional[str] = Field(default=None, alias="BeeperTelephoneNumber")
    callback_telephone_number: Optional[str] = Field(default=None, alias="CallbackTelephoneNumber")
    other_telephone_number: Optional[str] = Field(default=None, alias="OtherTelephoneNumber")
    primary_telephone_number: Optional[str] = Field(default=None, alias="PrimaryTelephoneNumber")
    telex_number: Optional[str] = Field(default=None, alias="TelexNumber")
    text_telephone: Optional[str] = Field(default=None, alias="TextTelephone")
    isdn_number: Optional[str] = Field(default=None, alias="IsdnNumber")
    primary_fax_number: Optional[str] = Field(default=None, alias="PrimaryFaxNumber")
    business_fax_number: Optional[str] = Field(default=None, alias="BusinessFaxNumber")
    home_fax_number: Optional[str] = Field(default=None, alias="HomeFaxNumber")

    email_1_address: Optional[str] = Field(default=None, alias="Email1EmailAddress")
    email_1_display_name: Optional[str] = Field(default=None, alias="Email1DisplayName")
    email_2_address: Optional[str] = Field(default=None, alias="Email2EmailAddress")
    email_2_display_name: Optional[str] = Field(default=None, alias="Email2DisplayName")
    email_3_address: Optional[str] = Field(default=None, alias="Email3EmailAddress")
    email_3_display_name: Optional[str] = Field(default=None, alias="Email3DisplayName")

    birthday: Optional[date] = Field(default=None, alias="Birthday")
    wedding_anniversary: Optional[date] = Field(default=None, alias="WeddingAnniversary")
    spouse_name: Optional[str] = Field(default=None, alias="SpouseName")
    profession: Optional[str] = Field(default=None, alias="Profession")
    assistant_name: Optional[str] = Field(default=None, alias="AssistantName")
    web_page: Optional[str] = Field(default=None, alias="Html")

    @property
    def item_type(self) -> ItemType:
        return ItemType.CONTACT


class TaskItem(HeaderItem):
    """Task metadata."""

    subject: Optional[str] = Field(default=None, alias="Subject")
    start_date: Optional[datetime] = Field(default=None, alias="StartDate")
    due_date: Optional[datetime] = Field(default=None, alias="DueDate")
    importance: Optional[ImportanceValue] = Field(default=None, alias="ImportanceText")
    status_text: Optional[str] = Field(default=None, alias="StatusText")
    percentage_complete: Optional[float] = Field(
        default=None, alias="PercentageComplete", description="Completion as a fraction"
    )
    estimated_effort_text: Optional[str] = Field(default=None, alias="EstimatedEffortText")
    actual_effort_text: Optional[str] = Field(default=None, alias="ActualEffortText")
    owner: Optional[str] = Field(default=None, alias="Owner")
    contacts: Optional[list[str]] = Field(default=None, alias="Contacts")
    categories: Optional[list[str]] = Field(default=None, alias="Categories")
    companies: Optional[list[str]] = Field(default=None, alias="Companies")
    billing_information: Optional[str] = Field(default=None, alias="BillingInformation")
    mileage: Optional[str] = Field(default=None, alias="Mileage")
    attachments: Optional[list[AttachmentEntry]] = Field(default=None, alias="Attachments")

    @property
    def item_type(self) -> ItemType:
        return ItemType.TASK


class KeyedItem(HeaderItem):
    """Loosely typed key/value metadata rendered in iteration order."""

    values: dict[str, Any] = Field(default_factory=dict)

    @property
    def item_type(self) -> ItemType:
        return ItemType.GENERIC
