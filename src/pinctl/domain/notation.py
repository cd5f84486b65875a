"""PIN grammar — the bidirectional contract between text and fields.

::

    identifier      := [state-modifier] letter [terminal-marker]
    state-modifier  := "+" | "-"
    letter          := [A-Za-z]
    terminal-marker := "^"

INVARIANT: Matching is always anchored on both ends (``fullmatch``).
Partial matches, surrounding whitespace and trailing newlines are rejected.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from pinctl.domain.errors import InvalidNotationError
from pinctl.domain.types import PieceType, Side, State

PIN_PATTERN: re.Pattern[str] = re.compile(
    r"(?P<prefix>[-+])?(?P<letter>[A-Za-z])(?P<terminal>\^)?"
)

ENHANCED_PREFIX = "+"
DIMINISHED_PREFIX = "-"
NORMAL_PREFIX = ""
TERMINAL_MARKER = "^"

STATE_PREFIXES: dict[State, str] = {
    State.NORMAL: NORMAL_PREFIX,
    State.ENHANCED: ENHANCED_PREFIX,
    State.DIMINISHED: DIMINISHED_PREFIX,
}

_PREFIX_STATES: dict[str, State] = {v: k for k, v in STATE_PREFIXES.items()}


class NotationParts(NamedTuple):
    """Fields decoded from a notation string."""

    type: PieceType
    side: Side
    state: State
    terminal: bool


def is_valid(text: object) -> bool:
    """Check whether *text* is a PIN string. Never raises."""
    if not isinstance(text, str):
        return False
    return PIN_PATTERN.fullmatch(text) is not None


def decode(text: object) -> NotationParts:
    """Split a PIN string into its four fields.

    Raises:
        InvalidNotationError: *text* is not a string or does not match.
    """
    match = PIN_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise InvalidNotationError(text)

    letter = match.group("letter")
    return NotationParts(
        type=PieceType(letter.upper()),
        side=Side.FIRST if letter.isupper() else Side.SECOND,
        state=_PREFIX_STATES[match.group("prefix") or NORMAL_PREFIX],
        terminal=match.group("terminal") is not None,
    )


def encode_letter(piece_type: PieceType, side: Side) -> str:
    """Render the type letter in the case that encodes *side*."""
    return piece_type.value if side is Side.FIRST else piece_type.value.lower()


def encode(piece_type: PieceType, side: Side, state: State, terminal: bool) -> str:
    """Render the four fields as a PIN string."""
    suffix = TERMINAL_MARKER if terminal else ""
    return f"{STATE_PREFIXES[state]}{encode_letter(piece_type, side)}{suffix}"
