"""Subcommand modules for pinctl.

Provides register_commands() which uses deferred imports to keep
``pinctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pinctl.commands.check import check
    from pinctl.commands.compare import compare
    from pinctl.commands.describe import describe
    from pinctl.commands.format_cmd import format_cmd
    from pinctl.commands.parse import parse
    from pinctl.commands.transform import transform

    cli.add_command(parse)
    cli.add_command(check)
    cli.add_command(format_cmd)
    cli.add_command(transform)
    cli.add_command(describe)
    cli.add_command(compare)
