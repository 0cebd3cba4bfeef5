"""Application layer - use cases and port definitions.

Contains the message renderer use case and the port protocols that define
the interfaces for adapter implementations.

Contents:
    * :mod:`.renderer` - Message renderer use case
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    HostDocument,
    InitLogging,
    LoadDocument,
    LoadRendererSettings,
)
from .renderer import MessageRenderer, display_message, init, render_on_load

__all__ = [
    # Use cases
    "MessageRenderer",
    "display_message",
    "init",
    "render_on_load",
    # Ports
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "HostDocument",
    "InitLogging",
    "LoadDocument",
    "LoadRendererSettings",
]
