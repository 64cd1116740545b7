"""Localized header labels.

The renderer never reaches for a global label set; a :class:`LabelTable` is
handed to it. The table is read-only once built, so one instance can be shared
between any number of concurrent renders.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType

import structlog

from msg_header_merge.exceptions import ConfigurationError

logger = structlog.get_logger()


class LabelId(str, Enum):
    """Logical identifiers for every localized string used in a header."""

    # Formats and fixed texts
    DATE_FORMAT = "date_format"
    DATE_TIME_FORMAT = "date_time_format"
    IMPORTANCE_LOW_TEXT = "importance_low_text"
    IMPORTANCE_NORMAL_TEXT = "importance_normal_text"
    IMPORTANCE_HIGH_TEXT = "importance_high_text"
    FOLLOW_UP_COMPLETED_TEXT = "follow_up_completed_text"
    SIGNED_BY_ON = "signed_by_on"

    # E-mail
    EMAIL_FROM = "email_from"
    EMAIL_SENT_ON = "email_sent_on"
    EMAIL_TO = "email_to"
    EMAIL_CC = "email_cc"
    EMAIL_BCC = "email_bcc"
    EMAIL_SIGNED_BY = "email_signed_by"
    EMAIL_SUBJECT = "email_subject"
    EMAIL_ATTACHMENTS = "email_attachments"
    EMAIL_FOLLOW_UP = "email_follow_up"
    EMAIL_FOLLOW_UP_FLAG = "email_follow_up_flag"
    EMAIL_FOLLOW_UP_STATUS = "email_follow_up_status"
    EMAIL_CATEGORIES = "email_categories"
    IMPORTANCE = "importance"

    # Appointment
    APPOINTMENT_SUBJECT = "appointment_subject"
    APPOINTMENT_LOCATION = "appointment_location"
    APPOINTMENT_START = "appointment_start"
    APPOINTMENT_END = "appointment_end"
    APPOINTMENT_RECURRENCE_TYPE = "appointment_recurrence_type"
    APPOINTMENT_RECURRENCE_PATTERN = "appointment_recurrence_pattern"
    APPOINTMENT_CLIENT_INTENT = "appointment_client_intent"
    APPOINTMENT_ORGANIZER = "appointment_organizer"
    APPOINTMENT_MANDATORY_PARTICIPANTS = "appointment_mandatory_participants"
    APPOINTMENT_OPTIONAL_PARTICIPANTS = "appointment_optional_participants"
    APPOINTMENT_ATTACHMENTS = "appointment_attachments"

    # Contact
    CONTACT_DISPLAY_NAME = "contact_display_name"
    CONTACT_SUR_NAME = "contact_sur_name"
    CONTACT_GIVEN_NAME = "contact_given_name"
    CONTACT_FUNCTION = "contact_function"
    CONTACT_DEPARTMENT = "contact_department"
    CONTACT_COMPANY = "contact_company"
    CONTACT_WORK_ADDRESS = "contact_work_address"
    CONTACT_HOME_ADDRESS = "contact_home_address"
    CONTACT_OTHER_ADDRESS = "contact_other_address"
    CONTACT_INSTANT_MESSAGING_ADDRESS = "contact_instant_messaging_address"
    CONTACT_BUSINESS_TELEPHONE = "contact_business_telephone"
    CONTACT_BUSINESS_TELEPHONE_2 = "contact_business_telephone_2"
    CONTACT_ASSISTANT_TELEPHONE = "contact_assistant_telephone"
    CONTACT_COMPANY_MAIN_TELEPHONE = "contact_company_main_telephone"
    CONTACT_HOME_TELEPHONE = "contact_home_telephone"
    CONTACT_HOME_TELEPHONE_2 = "contact_home_telephone_2"
    CONTACT_CELLULAR_TELEPHONE = "contact_cellular_telephone"
    CONTACT_CAR_TELEPHONE = "contact_car_telephone"
    CONTACT_RADIO_TELEPHONE = "contact_radio_telephone"
    CONTACT_BEEPER_TELEPHONE = "contact_beeper_telephone"
    CONTACT_CALLBACK_TELEPHONE = "contact_callback_telephone"
    CONTACT_OTHER_TELEPHONE = "contact_other_telephone"
    CONTACT_PRIMARY_TELEPHONE = "contact_primary_telephone"
    CONTACT_TELEX = "contact_telex"
    CONTACT_TEXT_TELEPHONE = "contact_text_telephone"
    CONTACT_ISDN = "contact_isdn"
    CONTACT_PRIMARY_FAX = "contact_primary_fax"
    CONTACT_BUSINESS_FAX = "contact_business_fax"
    CONTACT_HOME_FAX = "contact_home_fax"
    CONTACT_EMAIL_1_ADDRESS = "contact_email_1_address"
    CONTACT_EMAIL_1_DISPLAY_NAME = "contact_email_1_display_name"
    CONTACT_EMAIL_2_ADDRESS = "contact_email_2_address"
    CONTACT_EMAIL_2_DISPLAY_NAME = "contact_email_2_display_name"
    CONTACT_EMAIL_3_ADDRESS = "contact_email_3_address"
    CONTACT_EMAIL_3_DISPLAY_NAME = "contact_email_3_display_name"
    CONTACT_BIRTHDAY = "contact_birthday"
    CONTACT_WEDDING_ANNIVERSARY = "contact_wedding_anniversary"
    CONTACT_SPOUSE_NAME = "contact_spouse_name"
    CONTACT_PROFESSION = "contact_profession"
    CONTACT_ASSISTANT_NAME = "contact_assistant_name"
    CONTACT_WEB_PAGE = "contact_web_page"

    # Task
    TASK_SUBJECT = "task_subject"
    TASK_START_DATE = "task_start_date"
    TASK_DUE_DATE = "task_due_date"
    TASK_DATE_COMPLETED = "task_date_completed"
    TASK_STATUS = "task_status"
    TASK_PERCENTAGE_COMPLETE = "task_percentage_complete"
    TASK_ESTIMATED_EFFORT = "task_estimated_effort"
    TASK_ACTUAL_EFFORT = "task_actual_effort"
    TASK_OWNER = "task_owner"
    TASK_CONTACTS = "task_contacts"
    TASK_COMPANIES = "task_companies"
    TASK_BILLING_INFORMATION = "task_billing_information"
    TASK_MILEAGE = "task_mileage"


_ENGLISH: dict[LabelId, str] = {
    LabelId.DATE_FORMAT: "%d-%m-%Y",
    LabelId.DATE_TIME_FORMAT: "%d-%m-%Y %H:%M",
    LabelId.IMPORTANCE_LOW_TEXT: "Low",
    LabelId.IMPORTANCE_NORMAL_TEXT: "Normal",
    LabelId.IMPORTANCE_HIGH_TEXT: "High",
    LabelId.FOLLOW_UP_COMPLETED_TEXT: "Completed",
    LabelId.SIGNED_BY_ON: "on",
    LabelId.EMAIL_FROM: "From",
    LabelId.EMAIL_SENT_ON: "Sent on",
    LabelId.EMAIL_TO: "To",
    LabelId.EMAIL_CC: "Cc",
    LabelId.EMAIL_BCC: "Bcc",
    LabelId.EMAIL_SIGNED_BY: "Signed by",
    LabelId.EMAIL_SUBJECT: "Subject",
    LabelId.EMAIL_ATTACHMENTS: "Attachments",
    LabelId.EMAIL_FOLLOW_UP: "Follow up",
    LabelId.EMAIL_FOLLOW_UP_FLAG: "Follow up flag",
    LabelId.EMAIL_FOLLOW_UP_STATUS: "Status",
    LabelId.EMAIL_CATEGORIES: "Categories",
    LabelId.IMPORTANCE: "Importance",
    LabelId.APPOINTMENT_SUBJECT: "Subject",
    LabelId.APPOINTMENT_LOCATION: "Location",
    LabelId.APPOINTMENT_START: "Start",
    LabelId.APPOINTMENT_END: "End",
    LabelId.APPOINTMENT_RECURRENCE_TYPE: "Recurrence type",
    LabelId.APPOINTMENT_RECURRENCE_PATTERN: "Recurrence pattern",
    LabelId.APPOINTMENT_CLIENT_INTENT: "Status",
    LabelId.APPOINTMENT_ORGANIZER: "Organizer",
    LabelId.APPOINTMENT_MANDATORY_PARTICIPANTS: "Mandatory participants",
    LabelId.APPOINTMENT_OPTIONAL_PARTICIPANTS: "Optional participants",
    LabelId.APPOINTMENT_ATTACHMENTS: "Attachments",
    LabelId.CONTACT_DISPLAY_NAME: "Full name",
    LabelId.CONTACT_SUR_NAME: "Last name",
    LabelId.CONTACT_GIVEN_NAME: "First name",
    LabelId.CONTACT_FUNCTION: "Job title",
    LabelId.CONTACT_DEPARTMENT: "Department",
    LabelId.CONTACT_COMPANY: "Company",
    LabelId.CONTACT_WORK_ADDRESS: "Business address",
    LabelId.CONTACT_HOME_ADDRESS: "Home address",
    LabelId.CONTACT_OTHER_ADDRESS: "Other address",
    LabelId.CONTACT_INSTANT_MESSAGING_ADDRESS: "IM address",
    LabelId.CONTACT_BUSINESS_TELEPHONE: "Business",
    LabelId.CONTACT_BUSINESS_TELEPHONE_2: "Business 2",
    LabelId.CONTACT_ASSISTANT_TELEPHONE: "Assistant",
    LabelId.CONTACT_COMPANY_MAIN_TELEPHONE: "Company main phone",
    LabelId.CONTACT_HOME_TELEPHONE: "Home",
    LabelId.CONTACT_HOME_TELEPHONE_2: "Home 2",
    LabelId.CONTACT_CELLULAR_TELEPHONE: "Mobile",
    LabelId.CONTACT_CAR_TELEPHONE: "Car",
    LabelId.CONTACT_RADIO_TELEPHONE: "Radio",
    LabelId.CONTACT_BEEPER_TELEPHONE: "Pager",
    LabelId.CONTACT_CALLBACK_TELEPHONE: "Callback",
    LabelId.CONTACT_OTHER_TELEPHONE: "Other",
    LabelId.CONTACT_PRIMARY_TELEPHONE: "Primary phone",
    LabelId.CONTACT_TELEX: "Telex",
    LabelId.CONTACT_TEXT_TELEPHONE: "TTY/TDD phone",
    LabelId.CONTACT_ISDN: "ISDN",
    LabelId.CONTACT_PRIMARY_FAX: "Other fax",
    LabelId.CONTACT_BUSINESS_FAX: "Business fax",
    LabelId.CONTACT_HOME_FAX: "Home fax",
    LabelId.CONTACT_EMAIL_1_ADDRESS: "E-mail",
    LabelId.CONTACT_EMAIL_1_DISPLAY_NAME: "Display as",
    LabelId.CONTACT_EMAIL_2_ADDRESS: "E-mail 2",
    LabelId.CONTACT_EMAIL_2_DISPLAY_NAME: "Display as 2",
    LabelId.CONTACT_EMAIL_3_ADDRESS: "E-mail 3",
    LabelId.CONTACT_EMAIL_3_DISPLAY_NAME: "Display as 3",
    LabelId.CONTACT_BIRTHDAY: "Birthday",
    LabelId.CONTACT_WEDDING_ANNIVERSARY: "Anniversary",
    LabelId.CONTACT_SPOUSE_NAME: "Spouse/Partner",
    LabelId.CONTACT_PROFESSION: "Profession",
    LabelId.CONTACT_ASSISTANT_NAME: "Assistant name",
    LabelId.CONTACT_WEB_PAGE: "Web page",
    LabelId.TASK_SUBJECT: "Subject",
    LabelId.TASK_START_DATE: "Start date",
    LabelId.TASK_DUE_DATE: "Due date",
    LabelId.TASK_DATE_COMPLETED: "Date completed",
    LabelId.TASK_STATUS: "Status",
    LabelId.TASK_PERCENTAGE_COMPLETE: "Percentage complete",
    LabelId.TASK_ESTIMATED_EFFORT: "Estimated effort",
    LabelId.TASK_ACTUAL_EFFORT: "Actual effort",
    LabelId.TASK_OWNER: "Owner",
    LabelId.TASK_CONTACTS: "Contacts",
    LabelId.TASK_COMPANIES: "Companies",
    LabelId.TASK_BILLING_INFORMATION: "Billing information",
    LabelId.TASK_MILEAGE: "Mileage",
}


class LabelTable(Mapping[LabelId, str]):
    """Immutable lookup from :class:`LabelId` to a display string."""

    def __init__(self, labels: Mapping[LabelId, str]) -> None:
        missing = [label_id.value for label_id in LabelId if label_id not in labels]
        if missing:
            raise ConfigurationError(f"Label table is missing identifiers: {', '.join(missing)}")
        self._labels = MappingProxyType(dict(labels))

    def __getitem__(self, key: LabelId) -> str:
        return self._labels[key]

    def __iter__(self) -> Iterator[LabelId]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    @property
    def date_format(self) -> str:
        return self._labels[LabelId.DATE_FORMAT]

    @property
    def date_time_format(self) -> str:
        return self._labels[LabelId.DATE_TIME_FORMAT]

    @classmethod
    def english(cls) -> LabelTable:
        """Return the built-in English label table."""
        return cls(_ENGLISH)

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, str]) -> LabelTable:
        """Overlay ``overrides`` (keyed by ``LabelId`` value) on the English table.

        Raises:
            ConfigurationError: If an override names an unknown identifier or
                carries a non-string value.
        """
        labels = dict(_ENGLISH)
        for key, value in overrides.items():
            try:
                label_id = LabelId(key)
            except ValueError as exc:
                raise ConfigurationError(f"Unknown label identifier: {key!r}") from exc
            if not isinstance(value, str):
                raise ConfigurationError(f"Label {key!r} must be a string")
            labels[label_id] = value
        return cls(labels)

    @classmethod
    def from_json(cls, path: Path) -> LabelTable:
        """Load label overrides from a JSON object stored at ``path``.

        Raises:
            ConfigurationError: If the file is missing, is not a JSON object or
                contains unknown identifiers.
        """
        if not path.exists():
            raise ConfigurationError(f"Label file not found: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Label file is not valid JSON: {path}") from exc

        if not isinstance(data, dict):
            raise ConfigurationError(f"Label file must contain a JSON object: {path}")

        logger.info("label_overrides_loaded", path=str(path), override_count=len(data))
        return cls.from_overrides(data)

    def to_dict(self) -> dict[str, str]:
        return {label_id.value: text for label_id, text in self._labels.items()}
