"""Message renderer use case.

Writes a plain-text message into a named sink of the host document once the
host signals that its structural content finished loading.

Contents:
    * :func:`display_message` - Lookup-and-write with a diagnostic on failure.
    * :func:`init` - Display the canonical greeting and report startup.
    * :class:`MessageRenderer` - Idle/done state holder bound to a host signal.
    * :func:`render_on_load` - Attach a renderer to a host document and finish loading it.

System Role:
    Application layer. Receives the sink registry explicitly so it runs
    without any host environment. Diagnostics go through stdlib logging,
    which ``init_logging`` bridges into lib_log_rich.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.behaviors import CANONICAL_GREETING, DEFAULT_TARGET_ID, resolve_sink
from ..domain.enums import DisplayOutcome, RendererState
from ..domain.errors import TargetNotFoundError
from ..domain.sinks import ContentLoadedSignal, Sink

if TYPE_CHECKING:
    from .ports import HostDocument

logger = logging.getLogger(__name__)


def display_message(message: str, target_id: str, *, sinks: Mapping[str, Sink]) -> DisplayOutcome:
    """Replace the text of the sink named ``target_id`` with ``message``.

    A missing sink is reported on the diagnostic channel and leaves every
    sink untouched. The failure is never raised; the returned outcome is
    the only programmatic trace of it.

    Args:
        message: Text to present. Content and length are not restricted.
        target_id: Identifier of the sink to write into.
        sinks: Registry of sinks owned by the host document.

    Returns:
        ``DisplayOutcome.DISPLAYED`` or ``DisplayOutcome.TARGET_NOT_FOUND``.

    Raises:
        TypeError: If ``message`` is not a string.

    Example:
        >>> from hello_renderer.domain.sinks import Sink
        >>> sinks = {"message": Sink("message", text="Old Text")}
        >>> display_message("Hello World", "message", sinks=sinks)
        <DisplayOutcome.DISPLAYED: 'displayed'>
        >>> sinks["message"].text
        'Hello World'
    """
    if not isinstance(message, str):
        raise TypeError(f"message must be a string, got {type(message).__name__}")
    try:
        sink = resolve_sink(sinks, target_id)
    except TargetNotFoundError as exc:
        logger.error(str(exc), extra={"target_id": target_id})
        return DisplayOutcome.TARGET_NOT_FOUND
    sink.replace_text(message)
    return DisplayOutcome.DISPLAYED


def init(
    sinks: Mapping[str, Sink],
    *,
    message: str = CANONICAL_GREETING,
    target_id: str = DEFAULT_TARGET_ID,
) -> DisplayOutcome:
    """Display the startup message and emit one startup diagnostic.

    The startup line is always emitted. It only claims success when the
    message actually reached its sink.

    Args:
        sinks: Registry of sinks owned by the host document.
        message: Text to present, the canonical greeting by default.
        target_id: Sink to write into, ``message`` by default.

    Returns:
        Outcome of the nested :func:`display_message` call.
    """
    outcome = display_message(message, target_id, sinks=sinks)
    if outcome:
        logger.info("Application initialized successfully", extra={"target_id": target_id})
    else:
        logger.warning(
            "Application initialized without displaying its message",
            extra={"target_id": target_id, "outcome": outcome.value},
        )
    return outcome


@dataclass(slots=True)
class MessageRenderer:
    """Renderer bound to one host document.

    Starts ``IDLE``; the first :meth:`init` moves it to ``DONE`` for good.
    Re-running :meth:`init` rewrites the sink, so the last write wins.

    Example:
        >>> from hello_renderer.domain.sinks import ContentLoadedSignal, Sink
        >>> sinks = {"message": Sink("message")}
        >>> signal = ContentLoadedSignal()
        >>> renderer = MessageRenderer(sinks)
        >>> renderer.attach(signal)
        True
        >>> renderer.state
        <RendererState.IDLE: 'idle'>
        >>> signal.fire()
        True
        >>> renderer.state, sinks["message"].text
        (<RendererState.DONE: 'done'>, 'Hello World')
    """

    sinks: Mapping[str, Sink]
    message: str = CANONICAL_GREETING
    target_id: str = DEFAULT_TARGET_ID
    state: RendererState = RendererState.IDLE
    outcome: DisplayOutcome | None = None

    def init(self) -> DisplayOutcome:
        """Run :func:`init` with this renderer's message and target."""
        self.outcome = init(self.sinks, message=self.message, target_id=self.target_id)
        self.state = RendererState.DONE
        return self.outcome

    def attach(self, signal: ContentLoadedSignal) -> bool:
        """Schedule :meth:`init` for when ``signal`` fires.

        Returns:
            False when the signal already fired; the renderer then stays idle.
        """
        subscribed = signal.subscribe(self.init)
        if not subscribed:
            logger.debug("Content already loaded, renderer not scheduled", extra={"target_id": self.target_id})
        return subscribed


def render_on_load(
    document: HostDocument,
    *,
    message: str = CANONICAL_GREETING,
    target_id: str = DEFAULT_TARGET_ID,
) -> MessageRenderer:
    """Attach a renderer to ``document`` and let the document finish loading.

    Returns:
        The renderer, ``DONE`` unless the document had already finished
        loading before the renderer could attach.
    """
    renderer = MessageRenderer(document.sinks, message=message, target_id=target_id)
    renderer.attach(document.content_loaded)
    document.finish_loading()
    return renderer


__all__ = [
    "MessageRenderer",
    "display_message",
    "init",
    "render_on_load",
]
