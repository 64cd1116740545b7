"""Header rendering pipeline.

This package resolves the message body, builds the header template for an
item, formats it as HTML or padded text and injects it into the body.
"""

from .body import INLINE_OBJECT_SENTINEL, ResolvedBody, RtfConverter, resolve_body
from .formatter import label_width, render_header_block
from .merge import inject_header
from .templates import build_template, template_labels

__all__ = [
    "INLINE_OBJECT_SENTINEL",
    "ResolvedBody",
    "RtfConverter",
    "build_template",
    "inject_header",
    "label_width",
    "render_header_block",
    "resolve_body",
    "template_labels",
]
