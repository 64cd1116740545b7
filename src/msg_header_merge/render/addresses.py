"""Rendering of recipient lists and attachment lists.

Both produce values that are already encoded for the active content type,
so the header lines carrying them are written without further escaping.
"""

from __future__ import annotations

import html
from collections.abc import Sequence

from msg_header_merge.models import Address, Attachment, RenderContext
from msg_header_merge.models.items import AttachmentEntry, Recipients
from msg_header_merge.utils import format_file_size

RECIPIENT_SEPARATOR = "; "
ATTACHMENT_SEPARATOR = ", "


def _format_address(address: Address, context: RenderContext) -> str:
    email = address.email or ""
    name = address.display_name or ""

    if not context.content_is_html:
        if name and email and name != email:
            return f"{name} <{email}>"
        return name or email

    if context.hyperlinks_enabled and email:
        text = html.escape(name or email)
        return f'<a href="mailto:{html.escape(email)}">{text}</a>'

    if name and email and name != email:
        return f"{html.escape(name)} &lt;{html.escape(email)}&gt;"
    return html.escape(name or email)


def format_recipients(value: Recipients | None, context: RenderContext) -> str | None:
    """Render a recipient value for ``context``.

    A string is assumed to be pre-rendered by its producer and is returned
    untouched. An address list is rendered and joined with ``"; "``.
    """
    if value is None or isinstance(value, str):
        return value

    parts = [_format_address(address, context) for address in value]
    parts = [p for p in parts if p]
    return RECIPIENT_SEPARATOR.join(parts) if parts else None


def _format_attachment(entry: AttachmentEntry, context: RenderContext) -> str:
    if isinstance(entry, str):
        return entry

    attachment: Attachment = entry
    if not context.content_is_html:
        name = attachment.file_name
    elif context.hyperlinks_enabled and attachment.href:
        name = f'<a href="{html.escape(attachment.href)}">{html.escape(attachment.file_name)}</a>'
    else:
        name = html.escape(attachment.file_name)

    if attachment.size is None:
        return name
    return f"{name} ({format_file_size(attachment.size)})"


def format_attachments(
    entries: Sequence[AttachmentEntry] | None, context: RenderContext
) -> str | None:
    """Render the attachment list joined with ``", "``; empty lists yield None."""
    if not entries:
        return None
    return ATTACHMENT_SEPARATOR.join(_format_attachment(entry, context) for entry in entries)
