"""In-memory host document adapter for testing.

Provides a document loader that ignores the page path and hands back a
:class:`SinkDocument`, so CLI paths run without any HTML on disk.

Contents:
    * :class:`DocumentSpy` - Records loaded sources and serves a fixed sink set.
    * :func:`load_document_in_memory` - Loader serving one empty ``message`` sink.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.behaviors import DEFAULT_TARGET_ID
from ..document.sink_document import SinkDocument


def _default_texts() -> dict[str, str]:
    return {DEFAULT_TARGET_ID: ""}


def _empty_sources() -> list[Path]:
    return []


def _empty_documents() -> list[SinkDocument]:
    return []


@dataclass
class DocumentSpy:
    """Serves fresh in-memory documents and remembers what was asked for.

    Attributes:
        texts: ``{sink_id: initial_text}`` used for every served document.
        sources: Paths passed to :meth:`load_document`, in call order.
        documents: Documents handed out, in call order.

    Example:
        >>> spy = DocumentSpy(texts={"message": "Old Text"})
        >>> document = spy.load_document(Path("index.html"))
        >>> document.sinks["message"].text
        'Old Text'
        >>> len(spy.sources)
        1
    """

    texts: Mapping[str, str] = field(default_factory=_default_texts)
    sources: list[Path] = field(default_factory=_empty_sources)
    documents: list[SinkDocument] = field(default_factory=_empty_documents)

    def load_document(self, source: Path) -> SinkDocument:
        """Record ``source`` and return a new document built from :attr:`texts`."""
        document = SinkDocument.from_texts(self.texts)
        self.sources.append(source)
        self.documents.append(document)
        return document


def load_document_in_memory(source: Path) -> SinkDocument:
    """Return a document with a single empty ``message`` sink."""
    return SinkDocument.from_texts(_default_texts())


__all__ = [
    "DocumentSpy",
    "load_document_in_memory",
]
