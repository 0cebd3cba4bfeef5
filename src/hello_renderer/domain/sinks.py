"""Addressable output sinks and the one-shot content-loaded signal."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


def _empty_children() -> list[str]:
    """Create an empty typed list for child structure."""
    return []


@dataclass(slots=True)
class Sink:
    """A location in the host document able to display text.

    Attributes:
        sink_id: Identifier the host registered the sink under.
        text: Currently visible text.
        children: Tags of the child elements the sink holds.
        written: Set once :meth:`replace_text` ran at least once.

    Example:
        >>> sink = Sink("message", text="Old Text", children=["span"])
        >>> sink.replace_text("Hello World")
        >>> sink.text, sink.children, sink.written
        ('Hello World', [], True)
    """

    sink_id: str
    text: str = ""
    children: list[str] = field(default_factory=_empty_children)
    written: bool = False

    def replace_text(self, message: str) -> None:
        """Replace the visible text and drop any child structure."""
        self.text = message
        self.children.clear()
        self.written = True


class ContentLoadedSignal:
    """One-shot notification that the host finished loading its structure.

    Subscribers run in subscription order on the first :meth:`fire`. Later
    fires are ignored, and callbacks subscribed after the signal fired are
    never run.

    Example:
        >>> signal = ContentLoadedSignal()
        >>> calls = []
        >>> signal.subscribe(lambda: calls.append("init"))
        True
        >>> signal.fire(), signal.fire()
        (True, False)
        >>> calls
        ['init']
        >>> signal.subscribe(lambda: calls.append("late"))
        False
    """

    __slots__ = ("_callbacks", "_fired")

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], object]] = []
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def subscribe(self, callback: Callable[[], object]) -> bool:
        """Register ``callback``; return False when the signal already fired."""
        if self._fired:
            return False
        self._callbacks.append(callback)
        return True

    def fire(self) -> bool:
        """Run every subscriber once; return False on repeated fires."""
        if self._fired:
            return False
        self._fired = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()
        return True


__all__ = [
    "ContentLoadedSignal",
    "Sink",
]
