"""Header line formatting for HTML and fixed-width text output.

Every function here is pure and returns a string; a header block is the
concatenation of a start marker, the rendered lines and an end marker.
"""

from __future__ import annotations

import html
from collections.abc import Iterable

from msg_header_merge.models import EmptyLine, HeaderField, HeaderTemplate

HTML_TABLE_START = '<table style="font-family: Times New Roman; font-size: 12pt;">\n'
HTML_TABLE_END = "</table><br/>\n"
HTML_ROW = (
    '<tr style="height: 18px; vertical-align: top; ">'
    '<td style="font-weight: bold; white-space:nowrap;">{label}:</td>'
    "<td>{value}</td></tr>\n"
)
HTML_EMPTY_ROW = '<tr style="height: 18px; vertical-align: top; "><td>&nbsp;</td><td>&nbsp;</td></tr>\n'
HTML_LINE_BREAK = "<br/>"


def label_width(labels: Iterable[str]) -> int:
    """Return the text-mode label column width: longest label plus two."""
    lengths = [len(label) for label in labels]
    if not lengths:
        return 0
    return max(lengths) + 2


def header_start(is_html: bool) -> str:
    return HTML_TABLE_START if is_html else ""


def header_end(is_html: bool) -> str:
    return HTML_TABLE_END if is_html else "\n"


def header_empty_line(is_html: bool) -> str:
    return HTML_EMPTY_ROW if is_html else "\n"


def _split_lines(value: str) -> list[str]:
    return value.replace("\r\n", "\n").split("\n")


def header_line(field: HeaderField, is_html: bool, width: int = 0) -> str:
    """Render one field as an HTML table row or a padded text line.

    A field with no value renders nothing unless it is marked ``always``.
    Text output is never escaped.
    """
    value = field.value or ""
    if not value and not field.always:
        return ""

    if is_html:
        lines = _split_lines(value)
        if field.encode:
            lines = [html.escape(line) for line in lines]
        return HTML_ROW.format(label=html.escape(field.label), value=HTML_LINE_BREAK.join(lines))

    lines = _split_lines(value)
    text = ("\n" + " " * width).join(lines)
    return f"{(field.label + ':').ljust(width)}{text}\n"


def render_header_block(template: HeaderTemplate, is_html: bool, width: int = 0) -> str:
    """Render a whole template, framed by the start and end markers."""
    parts = [header_start(is_html)]
    for entry in template:
        if isinstance(entry, EmptyLine):
            parts.append(header_empty_line(is_html))
        else:
            parts.append(header_line(entry, is_html, width))
    parts.append(header_end(is_html))
    return "".join(parts)
