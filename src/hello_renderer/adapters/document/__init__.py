"""Host document adapters.

Contents:
    * :mod:`.sink_document` - In-memory document with a plain sink registry
    * :mod:`.html_page` - HTML host page parsed with ``html.parser``
"""

from __future__ import annotations

from .html_page import HtmlDocument, load_html_document
from .sink_document import SinkDocument

__all__ = [
    "HtmlDocument",
    "SinkDocument",
    "load_html_document",
]
