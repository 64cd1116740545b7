"""Unit tests for the header renderer."""

import json
from datetime import datetime

import pytest

from msg_header_merge.config import Settings
from msg_header_merge.exceptions import (
    ConversionFailedError,
    MissingRequiredFieldError,
    UnsupportedItemTypeError,
)
from msg_header_merge.labels import LabelId, LabelTable
from msg_header_merge.models import (
    Address,
    AppointmentItem,
    ContactItem,
    EmailItem,
    KeyedItem,
    MessageBody,
    TaskItem,
)
from msg_header_merge.renderer import HeaderRenderer
from msg_header_merge.render.formatter import HTML_TABLE_END, HTML_TABLE_START


class TestHeaderRenderer:
    """Test suite for HeaderRenderer."""

    def test_renderer_initialization(self) -> None:
        """Test that the renderer falls back to default settings and labels."""
        renderer = HeaderRenderer()

        assert renderer.settings is not None
        assert renderer.labels[LabelId.EMAIL_FROM] == "From"
        assert renderer.rtf_converter is None

    def test_labels_path_from_settings(self, tmp_path) -> None:
        path = tmp_path / "labels.json"
        path.write_text(json.dumps({"email_from": "Van"}), encoding="utf-8")

        renderer = HeaderRenderer(settings=Settings(labels_path=path))
        header = renderer.render_header(EmailItem(sender="a", to="b", subject="c"), is_html=False)

        assert header.startswith("Van:")

    def test_text_document_exact(self, renderer) -> None:
        item = EmailItem(
            sender="Alice <alice@example.com>",
            sent_on=datetime(2024, 3, 5, 14, 30),
            to="Bob <bob@example.com>",
            subject="Hello",
        )

        document = renderer.render(item, MessageBody(text="Body text\n"))

        assert document == (
            f"{'From:':<16}Alice <alice@example.com>\n"
            f"{'Sent on:':<16}05-03-2024 14:30\n"
            f"{'To:':<16}Bob <bob@example.com>\n"
            f"{'Subject:':<16}Hello\n"
            "\n"
            "\n"
            "Body text\n"
        )

    def test_html_document_injects_after_body_tag(self, renderer) -> None:
        item = EmailItem(sender="Alice", to="Bob", subject="<Hello>")
        body = MessageBody(html="<html><head></head><body class='m'><p>Hi</p></body></html>")

        document = renderer.render(item, body)

        prefix = "<html><head></head><body class='m'>"
        assert document.startswith(prefix + HTML_TABLE_START)
        assert document.endswith(HTML_TABLE_END + "<p>Hi</p></body></html>")
        assert "&lt;Hello&gt;" in document

    def test_every_label_exactly_once(self, renderer, full_email) -> None:
        document = renderer.render(full_email, MessageBody(html="<body></body>"))

        for label in [
            "From",
            "Sent on",
            "To",
            "Cc",
            "Bcc",
            "Signed by",
            "Subject",
            "Importance",
            "Attachments",
            "Follow up",
            "Status",
            "Date completed",
            "Categories",
        ]:
            assert document.count(f">{label}:</td>") == 1, label

        assert document.count("<table") == document.count("</table>") == 1

    def test_text_mode_has_no_table_markup(self, renderer, full_email) -> None:
        document = renderer.render(full_email, MessageBody(text="plain"))

        assert "<table" not in document
        assert "<tr" not in document
        assert document.endswith("\n\nplain")

    def test_width_is_stable_across_populated_fields(self, renderer) -> None:
        sparse = renderer.render_header(TaskItem(subject="A"), is_html=False)
        rich = renderer.render_header(
            TaskItem(subject="A", owner="Me", billing_information="B-1"), is_html=False
        )

        width = len("Percentage complete") + 2
        assert sparse.startswith("Subject:".ljust(width) + "A\n")
        assert rich.startswith("Subject:".ljust(width) + "A\n")
        assert "Owner:".ljust(width) + "Me\n" in rich

    def test_percentage_rendering(self, renderer) -> None:
        half = renderer.render_header(TaskItem(subject="x", percentage_complete=0.5), is_html=False)
        done = renderer.render_header(TaskItem(subject="x", percentage_complete=1.0), is_html=True)

        assert half.count("50%") == 1
        assert "<td>100%</td>" in done

    def test_rtf_body_is_converted(self, labels, mock_settings) -> None:
        renderer = HeaderRenderer(
            labels=labels,
            settings=mock_settings,
            rtf_converter=lambda rtf: "<html><body><p>converted</p></body></html>",
        )

        document = renderer.render(
            EmailItem(sender="a", to="b", subject="c"),
            MessageBody(rtf="{\\rtf1 body}", text="ignored"),
        )

        assert document.startswith("<html><body>" + HTML_TABLE_START)
        assert document.endswith("<p>converted</p></body></html>")
        assert "ignored" not in document

    def test_rtf_failure_aborts_render(self, labels, mock_settings) -> None:
        def broken(rtf: str) -> str:
            raise RuntimeError("converter crashed")

        renderer = HeaderRenderer(labels=labels, settings=mock_settings, rtf_converter=broken)

        with pytest.raises(ConversionFailedError):
            renderer.render(EmailItem(subject="x"), MessageBody(rtf="{\\rtf1"))

    def test_empty_body_uses_html_shell(self, renderer) -> None:
        document = renderer.render(EmailItem(sender="a", to="b", subject="c"), MessageBody())

        assert document.startswith("<html><head></head><body>" + HTML_TABLE_START)
        assert document.endswith(HTML_TABLE_END + "</body></html>")

    def test_hyperlinks_default_from_settings(self, labels) -> None:
        renderer = HeaderRenderer(labels=labels, settings=Settings(hyperlinks=True))
        item = EmailItem(
            sender=[Address(email="alice@example.com", display_name="Alice")],
            to=[Address(email="bob@example.com")],
            subject="x",
        )

        html_doc = renderer.render(item, MessageBody(html="<body></body>"))
        text_doc = renderer.render(item, MessageBody(text=""))

        assert '<a href="mailto:alice@example.com">Alice</a>' in html_doc
        assert '<a href="mailto:bob@example.com">bob@example.com</a>' in html_doc
        assert "Alice <alice@example.com>" in text_doc
        assert "<a " not in text_doc

    def test_hyperlinks_argument_overrides_settings(self, labels) -> None:
        renderer = HeaderRenderer(labels=labels, settings=Settings(hyperlinks=True))
        item = EmailItem(sender=[Address(email="alice@example.com")], to="b", subject="x")

        document = renderer.render(item, MessageBody(html="<body></body>"), hyperlinks=False)

        assert "<a " not in document
        assert "alice@example.com" in document

    def test_strict_mode_raises_for_missing_required_field(self, labels) -> None:
        renderer = HeaderRenderer(labels=labels, settings=Settings(strict_required_fields=True))

        with pytest.raises(MissingRequiredFieldError):
            renderer.render(EmailItem(sender="a", subject="x"), MessageBody(text="t"))

    def test_generic_keyed_text(self, renderer) -> None:
        item = KeyedItem(values={"A": "1", "B": None, "C": "x<y"})

        document = renderer.render(item, MessageBody(text="body"))

        assert document == "A:1\nC:x<y\n\n\n\nbody"

    def test_render_mapping(self, renderer) -> None:
        document = renderer.render_mapping(
            "appointment",
            {
                "Subject": "Planning",
                "Location": "Room 4",
                "EmailSender": "Alice",
                "EmailRecipientsTo": "Bob",
            },
            MessageBody(text=""),
        )

        width = len("Mandatory participants") + 2
        assert document.startswith("Subject:".ljust(width) + "Planning\n")
        assert "Organizer:".ljust(width) + "Alice\n" in document
        assert "Mandatory participants:".ljust(width) + "Bob\n" in document

    def test_render_mapping_unknown_type(self, renderer) -> None:
        with pytest.raises(UnsupportedItemTypeError):
            renderer.render_mapping("sticky_note", {}, MessageBody(text=""))

    def test_label_overrides_change_width(self, mock_settings) -> None:
        labels = LabelTable.from_overrides({"email_follow_up_status": "A much longer status label"})
        renderer = HeaderRenderer(labels=labels, settings=mock_settings)

        header = renderer.render_header(EmailItem(sender="a", to="b", subject="c"), is_html=False)

        assert header.startswith("From:".ljust(len("A much longer status label") + 2) + "a\n")


class TestNullMetadata:
    """Test suite for keyed metadata whose optional keys carry null values."""

    @pytest.mark.parametrize(
        ("item_type", "model", "absent"),
        [
            (
                "email",
                EmailItem,
                [
                    LabelId.EMAIL_SENT_ON,
                    LabelId.EMAIL_CC,
                    LabelId.IMPORTANCE,
                    LabelId.EMAIL_ATTACHMENTS,
                    LabelId.EMAIL_FOLLOW_UP,
                    LabelId.EMAIL_CATEGORIES,
                ],
            ),
            (
                "appointment",
                AppointmentItem,
                [
                    LabelId.APPOINTMENT_LOCATION,
                    LabelId.APPOINTMENT_RECURRENCE_TYPE,
                    LabelId.APPOINTMENT_OPTIONAL_PARTICIPANTS,
                    LabelId.EMAIL_CATEGORIES,
                    LabelId.IMPORTANCE,
                    LabelId.APPOINTMENT_ATTACHMENTS,
                ],
            ),
            (
                "contact",
                ContactItem,
                [
                    LabelId.CONTACT_DISPLAY_NAME,
                    LabelId.CONTACT_BUSINESS_TELEPHONE,
                    LabelId.CONTACT_BIRTHDAY,
                    LabelId.CONTACT_WEB_PAGE,
                ],
            ),
            (
                "task",
                TaskItem,
                [
                    LabelId.TASK_START_DATE,
                    LabelId.TASK_PERCENTAGE_COMPLETE,
                    LabelId.TASK_ESTIMATED_EFFORT,
                    LabelId.TASK_OWNER,
                    LabelId.TASK_CONTACTS,
                    LabelId.TASK_MILEAGE,
                ],
            ),
        ],
    )
    def test_null_keys_render_like_missing_keys(self, renderer, item_type, model, absent) -> None:
        """Test that null values drop their lines and blank lines."""
        mapping = {field.alias: None for field in model.model_fields.values()}

        document = renderer.render_mapping(item_type, mapping, MessageBody(text="body"))

        assert document == renderer.render_mapping(item_type, {}, MessageBody(text="body"))
        for label_id in absent:
            assert f"{renderer.labels[label_id]}:" not in document

    def test_null_email_keys_exact(self, renderer) -> None:
        mapping = {field.alias: None for field in EmailItem.model_fields.values()}

        document = renderer.render_mapping("email", mapping, MessageBody(text="body"))

        width = len("Date completed") + 2
        assert document == (
            "From:".ljust(width) + "\n"
            + "To:".ljust(width) + "\n"
            + "Subject:".ljust(width) + "\n"
            + "\n"
            + "\n"
            + "body"
        )

    def test_null_flag_completion_renders_open_flag(self, renderer) -> None:
        document = renderer.render_mapping(
            "email",
            {
                "EmailSender": "Alice",
                "EmailRecipientsTo": "Bob",
                "Subject": "Hi",
                "Attachments": None,
                "Flag": {
                    "Request": "Call back",
                    "Complete": None,
                    "DueDate": "2024-01-02T10:00:00",
                },
            },
            MessageBody(text=""),
        )

        width = len("Date completed") + 2
        assert "Follow up:".ljust(width) + "Call back\n" in document
        assert "Due date:".ljust(width) + "02-01-2024 10:00\n" in document
        assert "Status:" not in document
        assert "Attachments:" not in document
