"""Render the greeting into an HTML host page.

Contents:
    * :func:`cli_render` - Load a page, run the renderer on load, write the result.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from hello_renderer.application.ports import HostDocument
from hello_renderer.application.renderer import render_on_load

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ._settings import resolve_renderer_settings

logger = logging.getLogger(__name__)


@click.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("page", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--message", type=str, default=None, help="Text to display (default: [renderer].message)")
@click.option("--target", "target_id", type=str, default=None, help="Element id to write into (default: [renderer].target_id)")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the rendered page here instead of stdout",
)
@click.pass_context
def cli_render(
    ctx: click.Context,
    page: Path,
    message: str | None,
    target_id: str | None,
    output: Path | None,
) -> None:
    r"""Write the message into element TARGET of PAGE once the page has loaded.

    The page is written out even when the target element is missing; it is
    then unchanged and the command exits with code 65.

    \b
    Exit codes:
    - 2:  PAGE does not exist
    - 65: PAGE has no element with the target id
    - 78: invalid renderer configuration
    """
    cli_ctx = get_cli_context(ctx)
    settings = resolve_renderer_settings(cli_ctx, message=message, target_id=target_id)

    extra = {"command": "render", "page": str(page), "target_id": settings.target_id}
    with lib_log_rich.runtime.bind(job_id="cli-render", extra=extra):
        logger.info("Rendering host page", extra={"page": str(page), "output": str(output) if output else None})
        document = _load_page(cli_ctx, page)
        renderer = render_on_load(document, message=settings.message, target_id=settings.target_id)
        _write_page(document.serialize(), output)

        if not renderer.outcome:
            click.echo(f"\nError: Element with ID '{settings.target_id}' not found in {page}", err=True)
            raise SystemExit(ExitCode.TARGET_NOT_FOUND)


def _load_page(cli_ctx: CLIContext, page: Path) -> HostDocument:
    """Load ``page`` through the wired document loader.

    Raises:
        SystemExit: With ``FILE_NOT_FOUND`` when the page is missing.
    """
    try:
        return cli_ctx.services.load_document(page)
    except FileNotFoundError as exc:
        logger.error("Host page not found", extra={"page": str(page)})
        click.echo(f"\nError: Host page not found: {page}", err=True)
        raise SystemExit(ExitCode.FILE_NOT_FOUND) from exc


def _write_page(rendered: str, output: Path | None) -> None:
    if output is None:
        click.echo(rendered, nl=False)
        return
    output.write_text(rendered, encoding="utf-8")
    click.echo(f"Rendered page written to {output}")


__all__ = ["cli_render"]
