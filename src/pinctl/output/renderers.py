"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from pinctl.output.console import create_console, get_output, style_for_side, style_for_state

if TYPE_CHECKING:
    from rich.console import Console

    from pinctl.services.result import ServiceResult

_IDENTIFIER_KEYS = ("notation", "type", "side", "state", "terminal")


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(no_color=no_color, width=width)

    if result.ok or (result.op in _REPORT_ON_FAILURE and result.data):
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
    else:
        renderer = _render_error
    renderer(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if result.error is not None:
        return f"ERROR: {result.op} — {result.error.message}"

    data = result.data
    items = data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("notation", "")) for item in items)
    if "description" in data:
        return str(data["description"])
    if "equal" in data:
        return "equal" if data["equal"] else "different"
    if "notation" in data:
        return str(data["notation"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line, or ERROR with the failure message."""
    op = Text(f"  {result.op}", style="pin.op")
    if result.error is None:
        console.print(Text.assemble(Text("OK", style="pin.ok"), op))
    else:
        label = Text("ERROR", style="pin.error")
        console.print(Text.assemble(label, op, " — ", result.error.message))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pin.key")
    if key in ("notation", "input"):
        v = Text(str(value), style="pin.notation")
    elif key == "side":
        v = Text(str(value), style=style_for_side(str(value)))
    elif key == "state":
        v = Text(str(value), style=style_for_state(str(value)))
    elif isinstance(value, bool):
        v = Text("yes" if value else "no")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _identifier_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table with one row per parsed identifier."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("PIN", style="pin.notation", no_wrap=True)
    table.add_column("Type")
    table.add_column("Side")
    table.add_column("State")
    table.add_column("Terminal")

    for item in items:
        side = str(item.get("side", ""))
        state = str(item.get("state", ""))
        table.add_row(
            Text(str(item.get("notation", ""))),
            Text(str(item.get("type", ""))),
            Text(side, style=style_for_side(side)),
            Text(state, style=style_for_state(state)),
            Text("yes" if item.get("terminal") else "no"),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    err = result.error
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_identifier(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render format/transform/describe results as fields."""
    _status_line(console, result)
    if "description" in result.data:
        _field(console, "description", result.data["description"])
    if "input" in result.data:
        _field(console, "input", result.data["input"])
    for key in _IDENTIFIER_KEYS:
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose and result.data.get("steps"):
        _field(console, "steps", " ".join(result.data["steps"]))


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if items:
        console.print(_identifier_table(items))


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check counts and, when verbose, a valid/invalid mark per notation.

    Also used for failed checks, whose status line carries the error.
    """
    _status_line(console, result)
    _field(console, "valid", result.data.get("valid_count", 0))
    _field(console, "invalid", result.data.get("invalid_count", 0))
    if not verbose:
        return
    for item in result.data.get("items", []):
        if item.get("valid"):
            mark = Text("  ✓ ", style="pin.valid")
        else:
            mark = Text("  ✗ ", style="pin.invalid")
        console.print(Text.assemble(mark, str(item.get("notation", ""))))


def _render_compare(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("left", "right", "equal", "same_type", "same_side", "same_state", "same_terminal"):
        if key in result.data:
            _field(console, key, result.data[key])


# Ops whose failed results still carry a report worth rendering.
_REPORT_ON_FAILURE = frozenset({"check"})

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "parse": _render_parse,
    "check": _render_check,
    "format": _render_identifier,
    "transform": _render_identifier,
    "describe": _render_identifier,
    "compare": _render_compare,
}
