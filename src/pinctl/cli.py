"""Root CLI group for pinctl with global flags and command registration."""

from __future__ import annotations

import click

from pinctl import __version__
from pinctl.commands import register_commands
from pinctl.commands._base import PinGroup
from pinctl.commands._context import AppContext
from pinctl.config.settings import PinSettings


@click.group(
    cls=PinGroup,
    invoke_without_command=True,
    examples="""\
  pinctl parse +R^
  pinctl check K ++K
  pinctl transform K^ flip enhance""",
)
@click.version_option(version=__version__, prog_name="pinctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """pinctl — Piece Identifier Notation utility."""
    ctx.ensure_object(dict)
    settings = PinSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, command=ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
