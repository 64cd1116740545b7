"""Per-render value types: the render context and the header template."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class RenderContext:
    """Content-type mode for a single render."""

    content_is_html: bool
    hyperlinks_enabled: bool

    @classmethod
    def create(cls, content_is_html: bool, hyperlinks: bool) -> RenderContext:
        """Build a context; hyperlinks are meaningless in plain text and are dropped."""
        return cls(content_is_html=content_is_html, hyperlinks_enabled=hyperlinks and content_is_html)


@dataclass(frozen=True)
class HeaderField:
    """One label/value line of a header block.

    ``encode`` marks values that still need escaping for the active content
    type. Values produced already encoded (recipient lists, attachment
    anchors) carry ``encode=False``. ``always`` fields render even when the
    value is empty.
    """

    label: str
    value: str | None
    encode: bool = True
    always: bool = False


@dataclass(frozen=True)
class EmptyLine:
    """Blank separator line."""


EMPTY_LINE = EmptyLine()

HeaderTemplate = tuple[Union[HeaderField, EmptyLine], ...]
