"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info and greeting commands from :mod:`.info`
    * Page rendering command from :mod:`.render`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_hello, cli_info
from .render import cli_render

__all__ = [
    "cli_config",
    "cli_hello",
    "cli_info",
    "cli_render",
]
