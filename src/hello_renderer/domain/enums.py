"""Type-safe domain enums for output formats, outcomes and renderer state."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DisplayOutcome(str, Enum):
    """Result of a single display attempt.

    Only ``DISPLAYED`` is truthy so callers can write ``if outcome:``.

    Example:
        >>> bool(DisplayOutcome.DISPLAYED), bool(DisplayOutcome.TARGET_NOT_FOUND)
        (True, False)
    """

    DISPLAYED = "displayed"
    TARGET_NOT_FOUND = "target-not-found"

    def __bool__(self) -> bool:
        return self is DisplayOutcome.DISPLAYED


class RendererState(str, Enum):
    """Lifecycle of the message renderer: idle until initialised, then done."""

    IDLE = "idle"
    DONE = "done"


__all__ = [
    "DisplayOutcome",
    "OutputFormat",
    "RendererState",
]
