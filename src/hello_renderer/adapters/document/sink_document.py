"""In-memory host document holding a plain sink registry."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

import orjson

from hello_renderer.domain.sinks import ContentLoadedSignal, Sink


class SinkDocument:
    """Host document whose sinks live only in memory.

    Example:
        >>> document = SinkDocument.from_texts({"message": "Old Text"})
        >>> document.sinks["message"].text
        'Old Text'
        >>> document.finish_loading()
        True
        >>> document.serialize()
        '{"message":"Old Text"}'
    """

    def __init__(self, sinks: Mapping[str, Sink] | None = None) -> None:
        self._sinks: dict[str, Sink] = dict(sinks) if sinks else {}
        self._content_loaded = ContentLoadedSignal()

    @classmethod
    def from_texts(cls, texts: Mapping[str, str]) -> SinkDocument:
        """Build a document with one sink per ``{sink_id: initial_text}`` entry."""
        return cls({sink_id: Sink(sink_id, text=text) for sink_id, text in texts.items()})

    @property
    def sinks(self) -> Mapping[str, Sink]:
        return MappingProxyType(self._sinks)

    @property
    def content_loaded(self) -> ContentLoadedSignal:
        return self._content_loaded

    def finish_loading(self) -> bool:
        """Fire the content-loaded signal; False when it already fired."""
        return self._content_loaded.fire()

    def serialize(self) -> str:
        """Return the visible text of every sink as a JSON object."""
        return orjson.dumps({sink_id: sink.text for sink_id, sink in self._sinks.items()}).decode("utf-8")


__all__ = ["SinkDocument"]
