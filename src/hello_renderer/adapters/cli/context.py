"""State handed from the root group to the renderer commands.

Contents:
    * :class:`CLIContext` - Services and configuration resolved by the root group.
    * :func:`get_cli_context` - Fetch that state inside a subcommand.
    * :func:`use_tracebacks` - Switch lib_cli_exit_tools between summary and full tracebacks.
    * :func:`keep_traceback_mode` - Put the traceback mode back after a run.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from hello_renderer.composition import AppServices


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Configuration and services every subcommand renders with.

    ``set_overrides`` is kept so ``config --profile`` can reapply the root
    ``--set`` values to the configuration it reloads.
    """

    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root group stored on ``ctx``.

    Raises:
        RuntimeError: When a subcommand runs without the root group.
    """
    found = ctx.find_object(CLIContext)
    if found is None:
        raise RuntimeError(f"{ctx.command_path} needs the root group to run first; no CLIContext was stored")
    return found


def use_tracebacks(enabled: bool) -> None:
    """Print full, coloured tracebacks on failure when ``enabled``.

    Example:
        >>> with keep_traceback_mode():
        ...     use_tracebacks(True)
        ...     lib_cli_exit_tools.config.traceback
        True
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


@contextmanager
def keep_traceback_mode() -> Iterator[None]:
    """Restore the lib_cli_exit_tools traceback flags on exit."""
    config = lib_cli_exit_tools.config
    saved = (config.traceback, config.traceback_force_color)
    try:
        yield
    finally:
        config.traceback, config.traceback_force_color = saved


__all__ = [
    "CLIContext",
    "get_cli_context",
    "keep_traceback_mode",
    "use_tracebacks",
]
