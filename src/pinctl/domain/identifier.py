"""The Identifier value — a single piece in PIN notation.

An Identifier is an immutable record of ``(type, side, state, terminal)``.
Construction validates every field, ``parse()`` decodes notation text and
``str()`` encodes it back. All transformations return a new Identifier,
or ``self`` when nothing would change.

INVARIANT: ``parse(str(v)) == v`` for every Identifier ``v`` and
``str(parse(s)) == s`` for every valid notation string ``s``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from pinctl.domain.notation import (
    STATE_PREFIXES,
    TERMINAL_MARKER,
    decode,
    encode,
    encode_letter,
    is_valid,
)
from pinctl.domain.types import (
    PieceType,
    Side,
    State,
    coerce_side,
    coerce_state,
    coerce_type,
)


@dataclass(frozen=True, repr=False)
class Identifier:
    """Immutable piece identifier.

    Attributes:
        type: Canonical piece identity, ``A`` to ``Z``.
        side: Owning player, ``first`` (uppercase) or ``second`` (lowercase).
        state: ``normal``, ``enhanced`` (``+``) or ``diminished`` (``-``).
        terminal: Whether the piece carries the terminal marker (``^``).
    """

    type: PieceType
    side: Side
    state: State = State.NORMAL
    terminal: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", coerce_type(self.type))
        object.__setattr__(self, "side", coerce_side(self.side))
        object.__setattr__(self, "state", coerce_state(self.state))
        object.__setattr__(self, "terminal", bool(self.terminal))

    # --- Parsing / formatting ---

    @classmethod
    def parse(cls, text: str) -> Identifier:
        """Parse a PIN string.

        Examples:
            >>> Identifier.parse("+R^")
            Identifier(type='R', side='first', state='enhanced', terminal=True)
            >>> Identifier.parse("-p")
            Identifier(type='P', side='second', state='diminished', terminal=False)

        Raises:
            InvalidNotationError: *text* does not match the grammar.
        """
        parts = decode(text)
        return cls(parts.type, parts.side, parts.state, parts.terminal)

    @staticmethod
    def valid(text: object) -> bool:
        """Check whether *text* is a PIN string without raising."""
        return is_valid(text)

    def to_pin(self) -> str:
        """Return the PIN notation string."""
        return encode(self.type, self.side, self.state, self.terminal)

    def __str__(self) -> str:
        return self.to_pin()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(type={self.type.value!r}, side={self.side.value!r}, "
            f"state={self.state.value!r}, terminal={self.terminal!r})"
        )

    @property
    def letter(self) -> str:
        """Type letter in the case that encodes the side."""
        return encode_letter(self.type, self.side)

    @property
    def prefix(self) -> str:
        """State modifier (``+``, ``-`` or empty)."""
        return STATE_PREFIXES[self.state]

    @property
    def suffix(self) -> str:
        """Terminal marker (``^`` or empty)."""
        return TERMINAL_MARKER if self.terminal else ""

    # --- State transformations ---

    def enhance(self) -> Identifier:
        if self.is_enhanced:
            return self
        return dataclasses.replace(self, state=State.ENHANCED)

    def unenhance(self) -> Identifier:
        if not self.is_enhanced:
            return self
        return dataclasses.replace(self, state=State.NORMAL)

    def diminish(self) -> Identifier:
        if self.is_diminished:
            return self
        return dataclasses.replace(self, state=State.DIMINISHED)

    def undiminish(self) -> Identifier:
        if not self.is_diminished:
            return self
        return dataclasses.replace(self, state=State.NORMAL)

    def normalize(self) -> Identifier:
        """Clear any state modifier."""
        if self.is_normal:
            return self
        return dataclasses.replace(self, state=State.NORMAL)

    # --- Side / terminal transformations ---

    def flip(self) -> Identifier:
        """Hand the piece to the other side."""
        return dataclasses.replace(self, side=self.side.opposite)

    def mark_terminal(self) -> Identifier:
        if self.terminal:
            return self
        return dataclasses.replace(self, terminal=True)

    def unmark_terminal(self) -> Identifier:
        if not self.terminal:
            return self
        return dataclasses.replace(self, terminal=False)

    # --- Field replacement ---

    def with_type(self, new_type: PieceType | str) -> Identifier:
        """Return a copy with another type.

        Raises:
            InvalidTypeError: *new_type* is not one of ``A`` to ``Z``.
        """
        piece_type = coerce_type(new_type)
        if piece_type is self.type:
            return self
        return dataclasses.replace(self, type=piece_type)

    def with_side(self, new_side: Side | str) -> Identifier:
        """Return a copy owned by *new_side*.

        Raises:
            InvalidSideError: *new_side* is not ``first`` or ``second``.
        """
        side = coerce_side(new_side)
        if side is self.side:
            return self
        return dataclasses.replace(self, side=side)

    def with_state(self, new_state: State | str) -> Identifier:
        """Return a copy in *new_state*.

        Raises:
            InvalidStateError: *new_state* is not a known state.
        """
        state = coerce_state(new_state)
        if state is self.state:
            return self
        return dataclasses.replace(self, state=state)

    def with_terminal(self, new_terminal: object) -> Identifier:
        terminal = bool(new_terminal)
        if terminal == self.terminal:
            return self
        return dataclasses.replace(self, terminal=terminal)

    # --- Queries ---

    @property
    def is_normal(self) -> bool:
        return self.state is State.NORMAL

    @property
    def is_enhanced(self) -> bool:
        return self.state is State.ENHANCED

    @property
    def is_diminished(self) -> bool:
        return self.state is State.DIMINISHED

    @property
    def is_first_player(self) -> bool:
        return self.side is Side.FIRST

    @property
    def is_second_player(self) -> bool:
        return self.side is Side.SECOND

    @property
    def is_terminal(self) -> bool:
        return self.terminal

    # --- Pairwise comparison ---

    def same_type(self, other: object) -> bool:
        return isinstance(other, Identifier) and self.type is other.type

    def same_side(self, other: object) -> bool:
        return isinstance(other, Identifier) and self.side is other.side

    def same_state(self, other: object) -> bool:
        return isinstance(other, Identifier) and self.state is other.state

    def same_terminal(self, other: object) -> bool:
        return isinstance(other, Identifier) and self.terminal == other.terminal


def parse(text: str) -> Identifier:
    """Parse a PIN string into an Identifier. See :meth:`Identifier.parse`."""
    return Identifier.parse(text)


def valid(text: object) -> bool:
    """Check whether *text* is a PIN string. Never raises."""
    return is_valid(text)
