"""The ``hello-renderer`` command group.

Before any command runs, the group builds the services, reads the layered
configuration (``--profile`` and ``--set`` included) and starts logging.
``render`` and ``hello`` then only resolve their renderer settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from hello_renderer import __init__conf__
from hello_renderer.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, use_tracebacks

if TYPE_CHECKING:
    from hello_renderer.composition import AppServices


def _build_services(ctx: click.Context) -> AppServices:
    """Call the services factory passed in as ``ctx.obj``."""
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided: invoke the CLI through main() or pass obj=build_production")
    return factory()


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--set'") from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full traceback when a command fails")
@click.option("--profile", default=None, metavar="NAME", help="Read configuration from profile NAME (e.g. 'staging')")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value, e.g. renderer.message=Hi (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Render a greeting into a host page once the page has loaded.

    ``ctx.obj`` comes in as the services factory and is replaced by the
    :class:`CLIContext` the commands read.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_renderer.composition import build_production
        >>> result = CliRunner().invoke(cli, ["hello", "--message", "Hi"], obj=build_production)
        >>> result.exit_code, "Hi" in result.stdout
        (0, True)
    """
    use_tracebacks(traceback)
    services = _build_services(ctx)
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    ctx.obj = CLIContext(config=config, services=services, profile=profile, set_overrides=set_overrides)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # The command modules import this package; registering after the group exists avoids the cycle.
    from .commands import cli_config, cli_hello, cli_info, cli_render

    for command in (cli_info, cli_hello, cli_render, cli_config):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
