"""Command-line interface: the ``hello-renderer`` group and its commands.

Contents:
    * Root command group from :mod:`.root`
    * Process entry point from :mod:`.main`
    * Command functions from :mod:`.commands`
    * Exit codes from :mod:`.exit_codes`
"""

from __future__ import annotations

from .commands import cli_config, cli_hello, cli_info, cli_render
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "ExitCode",
    "cli",
    "main",
    "cli_config",
    "cli_hello",
    "cli_info",
    "cli_render",
]
