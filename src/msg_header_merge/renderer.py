"""Header renderer implementation.

This module provides the entry point that turns an item record and its body
into one final document with the metadata header block injected.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from msg_header_merge.config import Settings
from msg_header_merge.labels import LabelTable
from msg_header_merge.models import HeaderItem, ItemType, MessageBody, RenderContext, item_from_mapping
from msg_header_merge.render import (
    RtfConverter,
    build_template,
    inject_header,
    label_width,
    render_header_block,
    resolve_body,
    template_labels,
)

logger = structlog.get_logger()


class HeaderRenderer:
    """Renders metadata header blocks and merges them into message bodies.

    A renderer holds only read-only collaborators, so one instance can serve
    concurrent renders; every call builds its own output.
    """

    def __init__(
        self,
        labels: LabelTable | None = None,
        rtf_converter: RtfConverter | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            labels: Localized label table. If None, loads the table named by
                ``settings.labels_path`` or falls back to English.
            rtf_converter: Callable converting RTF text to HTML, used when a
                message only has an RTF body.
            settings: Application settings. If None, uses default settings.
        """
        from msg_header_merge.config import get_settings

        self.settings = settings or get_settings()
        if labels is None:
            if self.settings.labels_path is not None:
                labels = LabelTable.from_json(self.settings.labels_path)
            else:
                labels = LabelTable.english()
        self.labels = labels
        self.rtf_converter = rtf_converter
        logger.debug(
            "header_renderer_initialized",
            strict=self.settings.strict_required_fields,
            rtf_converter=rtf_converter is not None,
        )

    def _width(self, item_type: ItemType, context: RenderContext) -> int:
        if context.content_is_html or item_type == ItemType.GENERIC:
            return 0
        return label_width(template_labels(item_type, self.labels))

    def render_header(self, item: HeaderItem, is_html: bool, hyperlinks: bool = False) -> str:
        """Render the header block for ``item`` without a body.

        Args:
            item: The item record to describe.
            is_html: Render an HTML table instead of padded text.
            hyperlinks: Render mailto and attachment links (HTML only).

        Returns:
            The complete header block, start and end markers included.
        """
        context = RenderContext.create(is_html, hyperlinks)
        template = build_template(
            item,
            context,
            self.labels,
            strict=self.settings.strict_required_fields,
        )
        return render_header_block(template, is_html, self._width(item.item_type, context))

    def render(
        self,
        item: HeaderItem,
        body: MessageBody,
        hyperlinks: bool | None = None,
    ) -> str:
        """Render ``item`` and inject its header into the resolved body.

        Args:
            item: The item record to describe.
            body: Available body representations.
            hyperlinks: Render links when the body is HTML. If None, uses
                ``settings.hyperlinks``.

        Returns:
            The final document string.

        Raises:
            UnsupportedItemTypeError: If the item type has no template.
            ConversionFailedError: If the RTF body cannot be converted.
            MissingRequiredFieldError: In strict mode, for absent required fields.
        """
        if hyperlinks is None:
            hyperlinks = self.settings.hyperlinks

        resolved = resolve_body(body, self.rtf_converter)
        header = self.render_header(item, resolved.is_html, hyperlinks)
        document = inject_header(resolved.body, header, resolved.is_html)

        logger.info(
            "document_rendered",
            item_type=item.item_type.value,
            is_html=resolved.is_html,
            header_length=len(header),
            document_length=len(document),
        )
        return document

    def render_mapping(
        self,
        item_type: str | ItemType,
        metadata: Mapping[str, Any],
        body: MessageBody,
        hyperlinks: bool | None = None,
    ) -> str:
        """Render an item given as a string-keyed metadata map.

        Raises:
            UnsupportedItemTypeError: If ``item_type`` is unknown.
            ValidationError: If the metadata does not fit the item record.
        """
        item = item_from_mapping(item_type, metadata)
        return self.render(item, body, hyperlinks=hyperlinks)
