"""Typed validation errors for PIN values.

All errors are local, synchronous data-validation failures. Each carries
a stable ``code`` (reused as ``ServiceError.code``), the ``field`` that
was rejected, and the offending ``value``.
"""

from __future__ import annotations

from typing import ClassVar


class PinError(ValueError):
    """Base class for every PIN validation failure."""

    code: ClassVar[str] = "INVALID"
    field: ClassVar[str] = ""
    template: ClassVar[str] = "Invalid value: {value!r}"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(self.template.format(value=value))


class InvalidNotationError(PinError):
    """Text does not match the PIN grammar."""

    code = "INVALID_NOTATION"
    field = "notation"
    template = "Invalid PIN string: {value!r}"


class InvalidTypeError(PinError):
    """Piece type outside the 26 canonical letters."""

    code = "INVALID_TYPE"
    field = "type"
    template = "Type must be a letter from A to Z, got: {value!r}"


class InvalidSideError(PinError):
    code = "INVALID_SIDE"
    field = "side"
    template = "Side must be 'first' or 'second', got: {value!r}"


class InvalidStateError(PinError):
    code = "INVALID_STATE"
    field = "state"
    template = "State must be 'normal', 'enhanced', or 'diminished', got: {value!r}"
