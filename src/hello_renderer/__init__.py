"""Public package surface exposing the renderer, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: greeting constants and sinks
- Application exports: the message renderer use case
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.renderer import MessageRenderer, display_message, init, render_on_load

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    DEFAULT_TARGET_ID,
    build_greeting,
)
from .domain.enums import DisplayOutcome
from .domain.sinks import ContentLoadedSignal, Sink

__all__ = [
    "CANONICAL_GREETING",
    "DEFAULT_TARGET_ID",
    "ContentLoadedSignal",
    "DisplayOutcome",
    "MessageRenderer",
    "Sink",
    "build_greeting",
    "display_message",
    "get_config",
    "init",
    "print_info",
    "render_on_load",
]
