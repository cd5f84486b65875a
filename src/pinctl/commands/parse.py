"""Command: decode PIN strings into their fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pinctl.commands._base import PinCommand

if TYPE_CHECKING:
    from pinctl.commands._context import AppContext


@click.command(
    cls=PinCommand,
    notation_args=True,
    examples="""\
  pinctl parse K
  pinctl parse +R^ k
  pinctl parse -p k^
  pinctl --json parse +R^""",
)
@click.argument("notations", nargs=-1, required=True)
@click.pass_obj
def parse(app: AppContext, notations: tuple[str, ...]) -> None:
    """Parse one or more PIN strings."""
    app.emit(app.service.parse(list(notations)))
