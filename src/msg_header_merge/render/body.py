"""Body source resolution.

Picks the body representation to render into, in strict priority order:
HTML, then RTF converted to HTML, then plain text, then an empty HTML shell.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from msg_header_merge.exceptions import ConversionFailedError
from msg_header_merge.models import MessageBody

logger = structlog.get_logger()

RtfConverter = Callable[[str], str]

# RTF converters drop the \objattph control word; this token survives the
# conversion and marks where inline objects were placed.
RTF_INLINE_OBJECT_MARKER = "\\objattph"
INLINE_OBJECT_SENTINEL = "[*[RTFINLINEOBJECT]*]"

EMPTY_HTML_DOCUMENT = "<html><head></head><body></body></html>"


@dataclass(frozen=True)
class ResolvedBody:
    """The canonical body string and its content type."""

    body: str
    is_html: bool


def convert_rtf(rtf: str, converter: RtfConverter | None) -> str:
    """Protect inline object markers and convert ``rtf`` to HTML.

    Raises:
        ConversionFailedError: If no converter is configured or the converter fails.
    """
    if converter is None:
        raise ConversionFailedError("Message has an RTF body but no RTF converter is configured")

    protected = rtf.replace(RTF_INLINE_OBJECT_MARKER, INLINE_OBJECT_SENTINEL)
    try:
        return converter(protected)
    except ConversionFailedError:
        logger.error("rtf_conversion_failed", rtf_length=len(rtf))
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("rtf_conversion_failed", rtf_length=len(rtf), error=str(exc))
        raise ConversionFailedError(f"RTF to HTML conversion failed: {exc}") from exc


def resolve_body(body: MessageBody, rtf_converter: RtfConverter | None = None) -> ResolvedBody:
    """Choose the body to render into.

    Args:
        body: The available body representations.
        rtf_converter: Callable turning RTF text into HTML.

    Returns:
        ResolvedBody: The chosen body and whether it is HTML.

    Raises:
        ConversionFailedError: If the RTF body cannot be converted.
    """
    if body.html:
        source, resolved = "html", ResolvedBody(body.html, True)
    elif body.rtf is not None:
        source, resolved = "rtf", ResolvedBody(convert_rtf(body.rtf, rtf_converter), True)
    elif body.text is not None:
        source, resolved = "text", ResolvedBody(body.text, False)
    else:
        source, resolved = "empty", ResolvedBody(EMPTY_HTML_DOCUMENT, True)

    logger.debug(
        "body_source_resolved",
        source=source,
        is_html=resolved.is_html,
        body_length=len(resolved.body),
    )
    return resolved
