"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting constants and sink lookup
    * :mod:`.sinks` - Sink value object and the content-loaded signal
    * :mod:`.enums` - Domain enumerations (OutputFormat, DisplayOutcome, RendererState)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    DEFAULT_TARGET_ID,
    build_greeting,
    resolve_sink,
)
from .enums import DisplayOutcome, OutputFormat, RendererState
from .errors import ConfigurationError, TargetNotFoundError
from .sinks import ContentLoadedSignal, Sink

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "DEFAULT_TARGET_ID",
    "build_greeting",
    "resolve_sink",
    # Sinks
    "ContentLoadedSignal",
    "Sink",
    # Enums
    "DisplayOutcome",
    "OutputFormat",
    "RendererState",
    # Errors
    "ConfigurationError",
    "TargetNotFoundError",
]
