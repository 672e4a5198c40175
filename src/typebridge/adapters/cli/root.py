"""Root command group: global options and boundary error reporting."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import rich_click as click

from typebridge import __init__conf__
from typebridge.adapters.config.overrides import apply_overrides
from typebridge.domain.errors import TypeBridgeError

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, TracebackState
from .exit_codes import exit_code_for

if TYPE_CHECKING:
    from typebridge.composition import AppServices

logger = logging.getLogger(__name__)


class BoundaryGroup(click.RichGroup):
    """Group that reports boundary errors on stderr and exits with their code.

    Any :class:`TypeBridgeError` escaping a subcommand ends the invocation
    with the code from :func:`exit_code_for`; other exceptions propagate to
    the entry point's traceback handling.
    """

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except TypeBridgeError as exc:
            code = exit_code_for(exc)
            logger.error("Boundary error", extra={"error": type(exc).__name__, "exit_code": int(code)})
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(code)


@click.group(
    cls=BoundaryGroup,
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show full Python traceback on errors")
@click.option("--profile", default=None, help="Configuration profile to load (e.g., 'production', 'test')")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting, e.g. typebridge.default_ownership=borrowed (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging, and hand a CLIContext to subcommands."""
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    try:
        config = apply_overrides(services.get_config(profile=profile), set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    services.init_logging(config)
    TracebackState.enabled_if(traceback).apply()
    ctx.obj = CLIContext(
        config=config,
        services=services,
        traceback=traceback,
        profile=profile,
        set_overrides=set_overrides,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Command modules import this package, so they load after ``cli`` exists.
    from .commands import cli_config, cli_info, cli_resolve, cli_types

    for command in (cli_info, cli_config, cli_types, cli_resolve):
        cli.add_command(command)


_register_commands()


__all__ = ["BoundaryGroup", "cli"]
