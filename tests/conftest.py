"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest
import structlog


@pytest.fixture(autouse=True)
def _isolate_global_state():
    """Reset cached settings and structlog configuration between tests."""
    from msg_header_merge.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def labels():
    """Provide the built-in English label table."""
    from msg_header_merge.labels import LabelTable

    return LabelTable.english()


@pytest.fixture
def mock_settings():
    """Provide lenient settings for testing."""
    from msg_header_merge.config import Settings

    return Settings(log_level="DEBUG", debug=True)


@pytest.fixture
def renderer(labels, mock_settings):
    """Provide a renderer with English labels and no RTF converter."""
    from msg_header_merge.renderer import HeaderRenderer

    return HeaderRenderer(labels=labels, settings=mock_settings)


@pytest.fixture
def full_email():
    """Provide a signed e-mail with every header field populated."""
    from msg_header_merge.models import EmailItem, FollowUpFlag, Importance

    return EmailItem(
        sender="Alice <alice@example.com>",
        sent_on=datetime(2024, 3, 5, 14, 30),
        to="Bob <bob@example.com>",
        cc="Carol <carol@example.com>",
        bcc="Dave <dave@example.com>",
        is_signed=True,
        signed_by="alice@example.com",
        signed_on=datetime(2024, 3, 5, 14, 29),
        subject="Quarterly report",
        importance=Importance.HIGH,
        attachments=["report.pdf (1.20 MB)", "notes.txt (512 B)"],
        flag=FollowUpFlag(
            request="Follow up",
            complete=True,
            complete_time=datetime(2024, 3, 8, 9, 0),
        ),
        categories=["Finance", "Q1"],
    )


@pytest.fixture
def full_task():
    """Provide a task with every header field populated."""
    from msg_header_merge.models import Importance, TaskItem

    return TaskItem(
        subject="Prepare budget",
        start_date=datetime(2024, 4, 1, 9, 0),
        due_date=datetime(2024, 4, 15, 17, 0),
        importance=Importance.NORMAL,
        status_text="In progress",
        percentage_complete=0.5,
        estimated_effort_text="8 hours",
        actual_effort_text="5 hours",
        owner="Alice",
        contacts=["Bob", "Carol"],
        categories=["Finance"],
        companies=["Acme", "Globex"],
        billing_information="Project 42",
        mileage="120 km",
    )


@pytest.fixture
def full_appointment():
    """Provide an appointment with every header field populated."""
    from msg_header_merge.models import AppointmentItem, Importance

    return AppointmentItem(
        subject="Planning",
        location="Room 4",
        start=datetime(2024, 5, 2, 10, 0),
        end=datetime(2024, 5, 2, 11, 0),
        recurrence_type_text="Weekly",
        recurrence_pattern="Every Thursday",
        client_intent_text="Accepted",
        organizer="Alice <alice@example.com>",
        mandatory_participants="Bob <bob@example.com>",
        optional_participants="Carol <carol@example.com>",
        categories=["Meetings"],
        importance=Importance.LOW,
        attachments=["agenda.docx (20.00 KB)"],
    )
