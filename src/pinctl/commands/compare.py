"""Command: compare two PIN strings field by field."""

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
  pinctl compare K k
  pinctl compare -p +p
  pinctl --json compare +R^ R""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def compare(app: AppContext, left: str, right: str) -> None:
    """Compare LEFT and RIGHT."""
    app.emit(app.service.compare(left, right))
