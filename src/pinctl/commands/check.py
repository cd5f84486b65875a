"""Command: validate PIN strings (exit 1 if any is invalid)."""

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
  pinctl check K +R^ -p
  pinctl -v check ++K K^^
  pinctl -q check "$PIECE" && echo ok""",
)
@click.argument("notations", nargs=-1, required=True)
@click.pass_obj
def check(app: AppContext, notations: tuple[str, ...]) -> None:
    """Check whether strings are valid PIN notation."""
    app.emit(app.service.check(list(notations)))
