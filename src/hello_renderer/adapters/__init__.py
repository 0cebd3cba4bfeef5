"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.document` - Host documents (HTML page, in-memory sinks)
    * :mod:`.config` - Configuration loading, display, overrides and renderer settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.memory` - In-memory port implementations for tests
"""

from __future__ import annotations

__all__: list[str] = []
