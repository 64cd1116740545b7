"""Unit tests for body source resolution."""

import pytest

from msg_header_merge.exceptions import ConversionFailedError
from msg_header_merge.models import MessageBody
from msg_header_merge.render.body import (
    EMPTY_HTML_DOCUMENT,
    INLINE_OBJECT_SENTINEL,
    resolve_body,
)


def _converter(rtf: str) -> str:
    return f"<html><body>{rtf}</body></html>"


def test_html_wins_over_rtf_and_text() -> None:
    body = MessageBody(html="<p>html</p>", rtf="{\\rtf1 x}", text="text")

    resolved = resolve_body(body, _converter)

    assert resolved.body == "<p>html</p>"
    assert resolved.is_html is True


def test_rtf_is_converted_when_html_missing() -> None:
    body = MessageBody(rtf="{\\rtf1 x}", text="text")

    resolved = resolve_body(body, _converter)

    assert resolved.body == "<html><body>{\\rtf1 x}</body></html>"
    assert resolved.is_html is True


def test_empty_html_falls_through() -> None:
    resolved = resolve_body(MessageBody(html="", text="plain"))

    assert resolved.body == "plain"
    assert resolved.is_html is False


def test_inline_object_markers_are_protected_before_conversion() -> None:
    seen: list[str] = []

    def converter(rtf: str) -> str:
        seen.append(rtf)
        return rtf

    resolve_body(MessageBody(rtf="a\\objattph b \\objattph c"), converter)

    assert seen == [f"a{INLINE_OBJECT_SENTINEL} b {INLINE_OBJECT_SENTINEL} c"]


def test_text_only() -> None:
    resolved = resolve_body(MessageBody(text="just text"))

    assert resolved.body == "just text"
    assert resolved.is_html is False


def test_no_body_yields_empty_html_shell() -> None:
    resolved = resolve_body(MessageBody())

    assert resolved.body == EMPTY_HTML_DOCUMENT == "<html><head></head><body></body></html>"
    assert resolved.is_html is True


def test_converter_failure_is_wrapped() -> None:
    def broken(rtf: str) -> str:
        raise ValueError("bad rtf")

    with pytest.raises(ConversionFailedError) as excinfo:
        resolve_body(MessageBody(rtf="{\\rtf1"), broken)

    assert isinstance(excinfo.value.__cause__, ValueError)


def test_converter_conversion_failed_error_propagates_unchanged() -> None:
    error = ConversionFailedError("upstream")

    def broken(rtf: str) -> str:
        raise error

    with pytest.raises(ConversionFailedError) as excinfo:
        resolve_body(MessageBody(rtf="{\\rtf1"), broken)

    assert excinfo.value is error


def test_rtf_without_converter_raises() -> None:
    with pytest.raises(ConversionFailedError):
        resolve_body(MessageBody(rtf="{\\rtf1 x}", text="fallback"))
