"""HTML host page adapter.

Parses a host page with the standard library ``html.parser`` and exposes
every element carrying an ``id`` attribute as a sink. Elements end where a
browser would end them, implied end tags included (``<p>`` before a
``<div>``, one ``<li>`` before the next). Serializing splices
the escaped text of written sinks back into the original markup; every
other byte of the page is kept as loaded.

Contents:
    * :class:`HtmlDocument` - Parsed host page with its sink registry.
    * :func:`load_html_document` - Read and parse a page from disk.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from html.parser import HTMLParser
from pathlib import Path

from hello_renderer.domain.sinks import Sink

from .sink_document import SinkDocument

logger = logging.getLogger(__name__)

#: Elements without content; they can never hold text.
_VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

#: Start tags that end an open ``<p>``.
_CLOSES_PARAGRAPH = frozenset(
    (
        "address article aside blockquote center dd details dialog dir div dl dt fieldset figcaption figure "
        "footer form h1 h2 h3 h4 h5 h6 header hgroup hr li listing main menu nav ol p plaintext pre search "
        "section summary table ul xmp"
    ).split()
)

#: Elements an implied end tag never reaches past.
_SCOPE_BOUNDARIES = frozenset(
    {"applet", "button", "caption", "html", "marquee", "object", "table", "td", "template", "th"}
)

_FOREIGN_ROOTS = frozenset({"math", "svg"})

_SECTION_ROWS = frozenset({"tbody", "tfoot", "thead"})

#: Start tag -> (open elements it ends, elements that stop the search).
_IMPLIED_END: dict[str, tuple[frozenset[str], frozenset[str]]] = {
    "li": (frozenset({"li"}), _SCOPE_BOUNDARIES | {"menu", "ol", "ul"}),
    "dt": (frozenset({"dd", "dt"}), _SCOPE_BOUNDARIES | {"dl"}),
    "dd": (frozenset({"dd", "dt"}), _SCOPE_BOUNDARIES | {"dl"}),
    "option": (frozenset({"option"}), frozenset({"datalist", "optgroup", "select"})),
    "optgroup": (frozenset({"optgroup", "option"}), frozenset({"datalist", "select"})),
    "tr": (frozenset({"tr"}), _SECTION_ROWS | {"table"}),
    "td": (frozenset({"td", "th"}), frozenset({"table", "tr"})),
    "th": (frozenset({"td", "th"}), frozenset({"table", "tr"})),
    "tbody": (_SECTION_ROWS, frozenset({"table"})),
    "thead": (_SECTION_ROWS, frozenset({"table"})),
    "tfoot": (_SECTION_ROWS, frozenset({"table"})),
}

Span = tuple[int, int]
"""Character range ``[start, end)`` of an element's inner content."""


def _empty_parts() -> list[str]:
    """Create an empty typed list for collected text."""
    return []


@dataclass(slots=True)
class _OpenElement:
    tag: str
    inner_start: int
    sink: Sink | None = None
    parts: list[str] = field(default_factory=_empty_parts)


class _SinkCollector(HTMLParser):
    """Collect id-carrying elements, their text content and inner spans."""

    def __init__(self, markup: str) -> None:
        super().__init__(convert_charrefs=True)
        self._length = len(markup)
        self._line_starts = [0] + [index + 1 for index, char in enumerate(markup) if char == "\n"]
        self._stack: list[_OpenElement] = []
        self.sinks: dict[str, Sink] = {}
        self.spans: dict[str, Span] = {}

    def _offset(self) -> int:
        line, column = self.getpos()
        return self._line_starts[line - 1] + column

    def _note_child(self, tag: str) -> None:
        if self._stack and self._stack[-1].sink is not None:
            self._stack[-1].sink.children.append(tag)

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._apply_implied_ends(tag)
        self._note_child(tag)
        if tag in _VOID_ELEMENTS:
            return
        inner_start = self._offset() + len(self.get_starttag_text() or "")
        element = _OpenElement(tag=tag, inner_start=inner_start)
        element_id = dict(attrs).get("id")
        # getElementById semantics: the first element with an id wins.
        if element_id and element_id not in self.sinks:
            element.sink = Sink(element_id)
            self.sinks[element_id] = element.sink
        self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # Outside SVG and MathML the slash is ignored: <div/> opens a div.
        if tag in _FOREIGN_ROOTS or any(open_.tag in _FOREIGN_ROOTS for open_ in self._stack):
            self._note_child(tag)
            return
        self.handle_starttag(tag, attrs)

    def handle_data(self, data: str) -> None:
        for element in self._stack:
            if element.sink is not None:
                element.parts.append(data)

    def handle_endtag(self, tag: str) -> None:
        for depth in range(len(self._stack) - 1, -1, -1):
            if self._stack[depth].tag == tag:
                break
        else:
            return
        self._close_from(depth, self._offset())

    def _apply_implied_ends(self, tag: str) -> None:
        """Close what the HTML parsing rules end implicitly before ``tag`` opens."""
        if tag in _CLOSES_PARAGRAPH:
            self._close_outermost(frozenset({"p"}), _SCOPE_BOUNDARIES)
        rule = _IMPLIED_END.get(tag)
        if rule is not None:
            self._close_outermost(*rule)

    def _close_outermost(self, targets: frozenset[str], boundaries: frozenset[str]) -> None:
        depth: int | None = None
        for index in range(len(self._stack) - 1, -1, -1):
            tag = self._stack[index].tag
            if tag in targets:
                depth = index
            elif tag in boundaries:
                break
        if depth is not None:
            self._close_from(depth, self._offset())

    def _close_from(self, depth: int, inner_end: int) -> None:
        while len(self._stack) > depth:
            self._close(self._stack.pop(), inner_end)

    def finish(self) -> None:
        """Close elements left open at the end of the page."""
        self.close()
        self._close_from(0, self._length)

    def _close(self, element: _OpenElement, inner_end: int) -> None:
        if element.sink is None:
            return
        element.sink.text = "".join(element.parts)
        self.spans[element.sink.sink_id] = (element.inner_start, inner_end)


class HtmlDocument(SinkDocument):
    """Host page parsed from HTML markup.

    Example:
        >>> page = HtmlDocument('<p id="message">Old <b>Text</b></p>')
        >>> sink = page.sinks["message"]
        >>> sink.text, sink.children
        ('Old Text', ['b'])
        >>> sink.replace_text("Hello <World>")
        >>> page.serialize()
        '<p id="message">Hello &lt;World&gt;</p>'
    """

    def __init__(self, markup: str) -> None:
        collector = _SinkCollector(markup)
        collector.feed(markup)
        collector.finish()
        super().__init__(collector.sinks)
        self._markup = markup
        self._spans = collector.spans

    @classmethod
    def from_texts(cls, texts: Mapping[str, str]) -> SinkDocument:
        """Not supported: a page's sinks come from its markup.

        Raises:
            TypeError: Always; build the page with ``HtmlDocument(markup)``.
        """
        raise TypeError("HtmlDocument is parsed from markup; use HtmlDocument(markup) or SinkDocument.from_texts")

    @property
    def markup(self) -> str:
        """The page as it was loaded."""
        return self._markup

    def serialize(self) -> str:
        """Return the page with the inner content of written sinks replaced.

        A written sink nested inside another written sink is dropped along
        with the rest of the outer sink's former content.
        """
        written = sorted(
            ((self._spans[sink_id], sink) for sink_id, sink in self.sinks.items() if sink.written),
            key=lambda item: item[0],
        )
        pieces: list[str] = []
        cursor = 0
        for (start, end), sink in written:
            if start < cursor:
                continue
            pieces.append(self._markup[cursor:start])
            pieces.append(html.escape(sink.text, quote=False))
            cursor = end
        pieces.append(self._markup[cursor:])
        return "".join(pieces)


def load_html_document(source: Path) -> HtmlDocument:
    """Read ``source`` as UTF-8 and parse it into an :class:`HtmlDocument`.

    Raises:
        FileNotFoundError: If the page does not exist.
    """
    markup = source.read_text(encoding="utf-8")
    document = HtmlDocument(markup)
    logger.debug("Loaded host page", extra={"source": str(source), "sinks": sorted(document.sinks)})
    return document


__all__ = [
    "HtmlDocument",
    "load_html_document",
]
