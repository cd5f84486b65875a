"""Command: describe a PIN string in words."""

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
  pinctl describe +R^
  pinctl -q describe -p""",
)
@click.argument("notation")
@click.pass_obj
def describe(app: AppContext, notation: str) -> None:
    """Describe NOTATION using labels from [pieces.labels]."""
    app.emit(app.service.describe(notation))
