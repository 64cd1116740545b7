"""Injection of a rendered header block into the resolved body."""

from __future__ import annotations

import re

import structlog

logger = structlog.get_logger()

_BODY_OPEN_TAG = re.compile(r"<body\b[^>]*>", re.IGNORECASE)


def inject_header(body: str, header: str, is_html: bool) -> str:
    """Insert ``header`` into ``body`` at exactly one point.

    HTML bodies receive the header right after the first ``<body ...>``
    opening tag, or in front of the document when there is none. Text bodies
    get the header prepended. The rest of the body is left byte for byte.
    """
    if not header:
        return body

    if is_html:
        match = _BODY_OPEN_TAG.search(body)
        if match is not None:
            position = match.end()
            logger.debug("header_injected", position=position, is_html=True)
            return body[:position] + header + body[position:]

    logger.debug("header_injected", position=0, is_html=is_html)
    return header + body
