"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from collections.abc import Mapping

from .errors import TargetNotFoundError
from .sinks import Sink

CANONICAL_GREETING = "Hello World"
DEFAULT_TARGET_ID = "message"


def build_greeting() -> str:
    r"""Return the canonical greeting string.

    This is the message the renderer writes when it initialises without
    configuration.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello World'
    """
    return CANONICAL_GREETING


def resolve_sink(sinks: Mapping[str, Sink], target_id: str) -> Sink:
    """Look up the sink registered under ``target_id``.

    Args:
        sinks: Registry of addressable sinks owned by the host document.
        target_id: Identifier of the requested sink.

    Returns:
        The sink registered under ``target_id``.

    Raises:
        TargetNotFoundError: When no sink carries that identifier.

    Example:
        >>> sinks = {"message": Sink("message")}
        >>> resolve_sink(sinks, "message").sink_id
        'message'
        >>> resolve_sink(sinks, "missing")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        TargetNotFoundError: Element with ID 'missing' not found
    """
    try:
        return sinks[target_id]
    except KeyError:
        raise TargetNotFoundError(target_id) from None


__all__ = [
    "CANONICAL_GREETING",
    "DEFAULT_TARGET_ID",
    "build_greeting",
    "resolve_sink",
]
