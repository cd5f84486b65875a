"""Piece type, side, and state enums.

These enums define the closed value domains of an Identifier. The
``coerce_*`` helpers are the only place raw input is checked against
them; everything downstream works with enum members.
"""

from __future__ import annotations

from enum import StrEnum

from pinctl.domain.errors import InvalidSideError, InvalidStateError, InvalidTypeError


class PieceType(StrEnum):
    """Canonical, side-independent piece identity (always uppercase)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"


class Side(StrEnum):
    """Which player owns the piece. Encoded by letter case."""

    FIRST = "first"
    SECOND = "second"

    @property
    def opposite(self) -> Side:
        return Side.SECOND if self is Side.FIRST else Side.FIRST


class State(StrEnum):
    """Piece status. Encoded by an optional prefix."""

    NORMAL = "normal"
    ENHANCED = "enhanced"
    DIMINISHED = "diminished"


def coerce_type(value: object) -> PieceType:
    """Return *value* as a PieceType or raise InvalidTypeError.

    Lowercase letters are rejected: case encodes side, never type.
    """
    if isinstance(value, PieceType):
        return value
    try:
        return PieceType(value)
    except (ValueError, TypeError):
        raise InvalidTypeError(value) from None


def coerce_side(value: object) -> Side:
    """Return *value* as a Side or raise InvalidSideError."""
    if isinstance(value, Side):
        return value
    try:
        return Side(value)
    except (ValueError, TypeError):
        raise InvalidSideError(value) from None


def coerce_state(value: object) -> State:
    """Return *value* as a State or raise InvalidStateError."""
    if isinstance(value, State):
        return value
    try:
        return State(value)
    except (ValueError, TypeError):
        raise InvalidStateError(value) from None
