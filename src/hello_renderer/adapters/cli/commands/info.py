"""Basic CLI commands for package info and the in-memory greeting.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_hello` - Render the greeting into an in-memory sink and print it.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello_renderer import __init__conf__
from hello_renderer.adapters.document.sink_document import SinkDocument
from hello_renderer.application.renderer import render_on_load

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._settings import resolve_renderer_settings

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_renderer.adapters.cli.root import cli
        >>> from hello_renderer.composition import build_production
        >>> CliRunner().invoke(cli, ["info"], obj=build_production).exit_code
        0
    """
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--message", type=str, default=None, help="Text to display (default: [renderer].message)")
@click.option("--target", "target_id", type=str, default=None, help="Sink id to write into (default: [renderer].target_id)")
@click.pass_context
def cli_hello(ctx: click.Context, message: str | None, target_id: str | None) -> None:
    """Render the greeting into an in-memory sink and print what it shows.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_renderer.adapters.cli.root import cli
        >>> from hello_renderer.composition import build_production
        >>> result = CliRunner().invoke(cli, ["hello", "--target", "banner"], obj=build_production)
        >>> "Hello World" in result.stdout
        True
    """
    cli_ctx = get_cli_context(ctx)
    settings = resolve_renderer_settings(cli_ctx, message=message, target_id=target_id)

    extra = {"command": "hello", "target_id": settings.target_id}
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra=extra):
        logger.info("Executing hello command")
        document = SinkDocument.from_texts({settings.target_id: ""})
        render_on_load(document, message=settings.message, target_id=settings.target_id)
        click.echo(document.sinks[settings.target_id].text)


__all__ = ["cli_hello", "cli_info"]
