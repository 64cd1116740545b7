"""Utility functions for msg-header-merge."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

_SIZE_UNITS = ("KB", "MB", "GB", "TB")


def format_number(value: float) -> str:
    """Default number-to-text conversion; integral values drop the fraction."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_percentage(fraction: float) -> str:
    """Render a completion fraction as a percentage (``0.5`` -> ``"50%"``).

    The value is ``fraction * 100`` with no rounding applied.
    """
    return format_number(fraction * 100) + "%"


def format_date(value: date | datetime | None, pattern: str) -> str | None:
    """Format a date or datetime with a strftime ``pattern``; None passes through."""
    if value is None:
        return None
    return value.strftime(pattern)


def format_file_size(size: int) -> str:
    """Return a human readable size such as ``"512 B"`` or ``"1.50 MB"``."""
    if size < 1024:
        return f"{size} B"

    value = float(size)
    unit = _SIZE_UNITS[0]
    for unit in _SIZE_UNITS:
        value /= 1024
        if value < 1024:
            break
    return f"{value:.2f} {unit}"


def join_values(values: Iterable[str] | None, separator: str) -> str | None:
    """Join ``values`` with ``separator``; None or an empty list yields None."""
    if values is None:
        return None
    items = [v for v in values if v is not None]
    if not items:
        return None
    return separator.join(items)
