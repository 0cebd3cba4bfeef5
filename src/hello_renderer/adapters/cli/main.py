"""Run the CLI the way a process does: arguments in, exit code out.

The console script and ``python -m hello_renderer`` both end up here, so a
failed render reports the same exit code either way.

Contents:
    * :func:`main` - Run the CLI and return its exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from hello_renderer import __init__conf__

from .context import keep_traceback_mode
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hello_renderer.composition import AppServices


def _dispatch(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        # standalone_mode=False hands errors back here instead of exiting.
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except BaseException as exc:
        return lib_cli_exit_tools.handle_cli_exception(exc)
    # --help and --version come back as Click's exit code.
    return result if isinstance(result, int) else ExitCode.SUCCESS


def _shutdown_logging() -> None:
    # Only the main thread owns the runtime; a worker must not tear it down.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``hello-renderer`` with ``argv`` and return the exit code.

    Failures never escape: lib_cli_exit_tools prints them (in full with
    ``--traceback``) and maps them to an exit code. The traceback mode is
    restored afterwards.

    Args:
        argv: Command-line arguments; ``sys.argv[1:]`` when None.
        services_factory: Builds the AppServices the commands run with,
            usually ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from hello_renderer.composition import build_production
        >>> main(["render", "index.html", "-o", "out.html"], services_factory=build_production)  # doctest: +SKIP
        Rendered page written to out.html
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass build_production from hello_renderer.composition")

    args = list(argv) if argv is not None else sys.argv[1:]
    with keep_traceback_mode():
        try:
            return _dispatch(args, services_factory)
        finally:
            _shutdown_logging()


__all__ = ["main"]
