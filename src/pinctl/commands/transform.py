"""Command: apply transformation steps to a PIN string."""

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
  pinctl transform K^ flip enhance
  pinctl transform K type=Q state=enhanced
  pinctl transform +r^ normalize unmark-terminal
  pinctl transform -p flip

Steps:
  enhance, diminish, normalize, unenhance, undiminish, flip,
  mark-terminal, unmark-terminal,
  type=<A-Z>, side=<first|second>, state=<normal|enhanced|diminished>,
  terminal=<true|false>""",
)
@click.argument("notation")
@click.argument("steps", nargs=-1)
@click.pass_obj
def transform(app: AppContext, notation: str, steps: tuple[str, ...]) -> None:
    """Apply STEPS to NOTATION, left to right."""
    app.emit(app.service.transform(notation, list(steps)))
