"""Command: build a PIN string from its fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pinctl.commands._base import PinCommand
from pinctl.domain.types import Side, State

if TYPE_CHECKING:
    from pinctl.commands._context import AppContext


@click.command(
    "format",
    cls=PinCommand,
    examples="""\
  pinctl format K
  pinctl format R --state enhanced --terminal
  pinctl format P --side second --state diminished""",
)
@click.argument("piece_type", metavar="TYPE")
@click.option(
    "--side",
    type=click.Choice([s.value for s in Side]),
    default=Side.FIRST.value,
    help="Owning player.",
)
@click.option(
    "--state",
    type=click.Choice([s.value for s in State]),
    default=State.NORMAL.value,
    help="Piece state.",
)
@click.option("--terminal/--no-terminal", default=False, help="Add the terminal marker.")
@click.pass_obj
def format_cmd(
    app: AppContext,
    piece_type: str,
    side: str,
    state: str,
    terminal: bool,
) -> None:
    """Format a PIN string from TYPE (A-Z) and options."""
    app.emit(app.service.build(piece_type, side, state, terminal))
