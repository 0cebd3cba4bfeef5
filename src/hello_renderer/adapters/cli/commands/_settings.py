"""Renderer settings resolution shared by ``hello`` and ``render``."""

from __future__ import annotations

import logging

import rich_click as click

from hello_renderer.adapters.config.settings import RendererSettings
from hello_renderer.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def resolve_renderer_settings(
    cli_ctx: CLIContext,
    *,
    message: str | None,
    target_id: str | None,
) -> RendererSettings:
    """Merge ``[renderer]`` configuration with command-line options.

    Options win over configuration.

    Raises:
        SystemExit: With ``CONFIG_ERROR`` when the result is invalid.
    """
    try:
        settings = cli_ctx.services.load_renderer_settings(cli_ctx.config)
        return settings.with_overrides(message=message, target_id=target_id)
    except ConfigurationError as exc:
        logger.error("Invalid renderer configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


__all__ = ["resolve_renderer_settings"]
