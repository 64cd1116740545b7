"""msg-header-merge - metadata header synthesis for message documents.

This package renders the metadata of e-mails, appointments, contacts and
tasks as an HTML table or aligned plain-text block and merges it into the
message body.
"""

__version__ = "0.1.0"

from msg_header_merge.config import Settings, get_settings
from msg_header_merge.labels import LabelId, LabelTable
from msg_header_merge.renderer import HeaderRenderer

__all__ = [
    "HeaderRenderer",
    "LabelId",
    "LabelTable",
    "Settings",
    "get_settings",
    "__version__",
]
