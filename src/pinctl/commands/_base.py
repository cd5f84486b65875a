"""Click base classes shared by pinctl commands.

``PinCommand`` and ``PinGroup`` accept two extra keyword arguments:

* ``examples``: text printed by an eager ``--examples`` flag, keeping
  ``--help`` short.
* ``notation_args`` (commands only): the positional arguments are PIN
  strings, so a diminished notation such as ``-p`` or ``-k^`` is taken
  as an argument rather than rejected as an unknown option.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesOption(click.Option):
    """Eager ``--examples`` flag that prints *examples* and exits."""

    def __init__(self, examples: str) -> None:
        super().__init__(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._show,
            help="Show usage examples.",
        )
        self.examples = examples

    def _show(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class PinCommand(click.Command):
    """Click Command with ``--examples`` and dash-prefixed notation support."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        notation_args: bool = False,
        **kwargs: Any,
    ) -> None:
        if notation_args:
            context_settings = dict(kwargs.get("context_settings") or {})
            context_settings["ignore_unknown_options"] = True
            kwargs["context_settings"] = context_settings
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.notation_args = notation_args
        if examples:
            self.params.append(ExamplesOption(examples))


class PinGroup(click.Group):
    """Click Group with ``--examples``; subcommands default to PinCommand."""

    command_class = PinCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(ExamplesOption(examples))
