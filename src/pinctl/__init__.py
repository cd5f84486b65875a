"""pinctl — Piece Identifier Notation (PIN) toolkit.

PIN encodes a single game piece in one to three ASCII characters::

    [<state>]<letter>[<terminal>]

The letter gives the piece type and its case gives the side, ``+``/``-``
mark enhanced/diminished pieces and ``^`` marks terminal pieces.
"""

from __future__ import annotations

from pinctl.domain.errors import (
    InvalidNotationError,
    InvalidSideError,
    InvalidStateError,
    InvalidTypeError,
    PinError,
)
from pinctl.domain.identifier import Identifier, parse, valid
from pinctl.domain.types import PieceType, Side, State

__version__ = "1.0.0"

__all__ = [
    "Identifier",
    "InvalidNotationError",
    "InvalidSideError",
    "InvalidStateError",
    "InvalidTypeError",
    "PieceType",
    "PinError",
    "Side",
    "State",
    "__version__",
    "parse",
    "valid",
]
