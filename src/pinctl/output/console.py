"""Rich Console factory and theme for pinctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PIN_THEME = Theme(
    {
        "pin.ok": "bold green",
        "pin.error": "bold red",
        "pin.op": "bold cyan",
        "pin.key": "dim",
        "pin.notation": "bold blue",
        "pin.side.first": "bold white",
        "pin.side.second": "bold magenta",
        "pin.state.enhanced": "green",
        "pin.state.diminished": "yellow",
        "pin.valid": "green",
        "pin.invalid": "red",
    }
)

_SIDE_STYLES: dict[str, str] = {
    "first": "pin.side.first",
    "second": "pin.side.second",
}

_STATE_STYLES: dict[str, str] = {
    "enhanced": "pin.state.enhanced",
    "diminished": "pin.state.diminished",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PIN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_side(side: str) -> str:
    """Return the Rich style name for a side."""
    return _SIDE_STYLES.get(side, "")


def style_for_state(state: str) -> str:
    """Return the Rich style name for a state (normal is unstyled)."""
    return _STATE_STYLES.get(state, "")
