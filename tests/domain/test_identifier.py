"""Tests for the Identifier value: construction, parsing, transforms, queries."""

from __future__ import annotations

import dataclasses
import itertools
from collections.abc import Callable

import pytest

from pinctl import parse, valid
from pinctl.domain.errors import (
    InvalidNotationError,
    InvalidSideError,
    InvalidStateError,
    InvalidTypeError,
)
from pinctl.domain.identifier import Identifier
from pinctl.domain.types import PieceType, Side, State

ALL_VALUES = [
    Identifier(piece_type, side, state, terminal)
    for piece_type, side, state, terminal in itertools.product(
        [PieceType.A, PieceType.K, PieceType.Z], Side, State, [False, True]
    )
]

ALL_NOTATIONS = [
    f"{prefix}{letter}{suffix}"
    for prefix, letter, suffix in itertools.product(["", "+", "-"], ["A", "k", "Z", "p"], ["", "^"])
]

STATE_SIDE_TYPE_TRANSFORMS: list[Callable[[Identifier], Identifier]] = [
    Identifier.enhance,
    Identifier.diminish,
    Identifier.normalize,
    Identifier.unenhance,
    Identifier.undiminish,
    Identifier.flip,
    lambda v: v.with_type("Q"),
    lambda v: v.with_side("second"),
    lambda v: v.with_state("enhanced"),
]


class TestConstruction:
    def test_defaults(self) -> None:
        ident = Identifier(PieceType.K, Side.FIRST)
        assert ident.state is State.NORMAL
        assert ident.terminal is False

    def test_string_values_are_coerced_to_enums(self) -> None:
        ident = Identifier("K", "second", "enhanced", True)
        assert ident.type is PieceType.K
        assert ident.side is Side.SECOND
        assert ident.state is State.ENHANCED
        assert ident == Identifier(PieceType.K, Side.SECOND, State.ENHANCED, terminal=True)

    @pytest.mark.parametrize("raw,expected", [(1, True), ("yes", True), (0, False), (None, False)])
    def test_terminal_is_coerced_to_bool(self, raw: object, expected: bool) -> None:
        assert Identifier("K", "first", terminal=raw).terminal is expected

    def test_lowercase_type_rejected(self) -> None:
        with pytest.raises(InvalidTypeError):
            Identifier("k", "first")

    def test_invalid_type(self) -> None:
        with pytest.raises(InvalidTypeError, match="A to Z"):
            Identifier("KING", "first")

    def test_invalid_side(self) -> None:
        with pytest.raises(InvalidSideError):
            Identifier("K", "white")

    def test_invalid_state(self) -> None:
        with pytest.raises(InvalidStateError):
            Identifier("K", "first", "promoted")

    def test_frozen(self) -> None:
        ident = Identifier("K", "first")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ident.state = State.ENHANCED  # type: ignore[misc]


class TestParse:
    def test_plain_king(self) -> None:
        ident = parse("K")
        assert ident.type is PieceType.K
        assert ident.side is Side.FIRST
        assert ident.state is State.NORMAL
        assert ident.terminal is False
        assert str(ident) == "K"

    def test_enhanced_terminal_rook(self) -> None:
        ident = parse("+R^")
        assert ident.type is PieceType.R
        assert ident.side is Side.FIRST
        assert ident.state is State.ENHANCED
        assert ident.terminal is True
        assert str(ident) == "+R^"

    def test_diminished_second_pawn(self) -> None:
        ident = parse("-p")
        assert ident.type is PieceType.P
        assert ident.side is Side.SECOND
        assert ident.state is State.DIMINISHED
        assert ident.terminal is False
        assert str(ident) == "-p"

    def test_case_encodes_side_not_type(self) -> None:
        assert parse("K").type == parse("k").type
        assert parse("K").side != parse("k").side

    def test_classmethod_and_function_agree(self) -> None:
        assert Identifier.parse("+b^") == parse("+b^")

    @pytest.mark.parametrize("text", ["", "++K", "K^^", "KK", " K", "K\n", "ñ", "+", "^"])
    def test_invalid_raises(self, text: str) -> None:
        with pytest.raises(InvalidNotationError):
            parse(text)

    @pytest.mark.parametrize("value", [None, 75, b"K"])
    def test_non_string_raises_notation_error(self, value: object) -> None:
        with pytest.raises(InvalidNotationError):
            parse(value)  # type: ignore[arg-type]


class TestValid:
    @pytest.mark.parametrize("text", ["K", "+R^", "-p", "z^"])
    def test_true(self, text: str) -> None:
        assert valid(text) is True
        assert Identifier.valid(text) is True

    @pytest.mark.parametrize("text", ["++K", "K^^", "", None, 42])
    def test_false_never_raises(self, text: object) -> None:
        assert valid(text) is False
        assert Identifier.valid(text) is False


class TestFormatting:
    def test_components(self) -> None:
        ident = parse("-k^")
        assert ident.prefix == "-"
        assert ident.letter == "k"
        assert ident.suffix == "^"

    def test_normal_components_are_empty(self) -> None:
        ident = parse("Q")
        assert ident.prefix == ""
        assert ident.suffix == ""

    def test_to_pin_matches_str(self) -> None:
        ident = Identifier("S", "second", "enhanced")
        assert ident.to_pin() == str(ident) == "+s"

    def test_repr(self) -> None:
        assert repr(parse("+R^")) == (
            "Identifier(type='R', side='first', state='enhanced', terminal=True)"
        )

    @pytest.mark.parametrize("text", ALL_NOTATIONS)
    def test_text_round_trip(self, text: str) -> None:
        assert str(parse(text)) == text

    @pytest.mark.parametrize("ident", ALL_VALUES, ids=str)
    def test_value_round_trip(self, ident: Identifier) -> None:
        assert parse(str(ident)) == ident


class TestStateTransforms:
    def test_enhance(self) -> None:
        assert parse("-k^").enhance() == parse("+k^")

    def test_diminish(self) -> None:
        assert parse("+R").diminish() == parse("-R")

    def test_normalize(self) -> None:
        assert parse("+R^").normalize() == parse("R^")

    def test_unenhance_only_clears_enhanced(self) -> None:
        assert parse("+R").unenhance() == parse("R")
        diminished = parse("-R")
        assert diminished.unenhance() is diminished

    def test_undiminish_only_clears_diminished(self) -> None:
        assert parse("-R").undiminish() == parse("R")
        enhanced = parse("+R")
        assert enhanced.undiminish() is enhanced

    @pytest.mark.parametrize(
        "text,method",
        [
            ("+K", "enhance"),
            ("-K", "diminish"),
            ("K", "normalize"),
            ("K", "unenhance"),
            ("K", "undiminish"),
            ("K^", "mark_terminal"),
            ("K", "unmark_terminal"),
        ],
    )
    def test_no_op_returns_same_instance(self, text: str, method: str) -> None:
        ident = parse(text)
        assert getattr(ident, method)() is ident

    @pytest.mark.parametrize("ident", ALL_VALUES, ids=str)
    def test_saturating_transforms_are_idempotent(self, ident: Identifier) -> None:
        assert ident.enhance().enhance() == ident.enhance()
        assert ident.diminish().diminish() == ident.diminish()
        assert ident.normalize().normalize() == ident.normalize()
        assert ident.mark_terminal().mark_terminal() == ident.mark_terminal()
        assert ident.unmark_terminal().unmark_terminal() == ident.unmark_terminal()

    def test_state_is_never_both(self) -> None:
        ident = parse("K").enhance().diminish()
        assert ident.is_diminished
        assert not ident.is_enhanced
        ident = ident.enhance()
        assert ident.is_enhanced
        assert not ident.is_diminished


class TestSideAndTerminalTransforms:
    def test_flip_then_enhance_keeps_terminal(self) -> None:
        assert str(parse("K^").flip().enhance()) == "+k^"

    @pytest.mark.parametrize("ident", ALL_VALUES, ids=str)
    def test_flip_is_involution(self, ident: Identifier) -> None:
        assert ident.flip() != ident
        assert ident.flip().flip() == ident

    def test_mark_and_unmark_terminal(self) -> None:
        assert str(parse("-p").mark_terminal()) == "-p^"
        assert str(parse("-p^").unmark_terminal()) == "-p"

    @pytest.mark.parametrize("ident", ALL_VALUES, ids=str)
    @pytest.mark.parametrize("transform", STATE_SIDE_TYPE_TRANSFORMS)
    def test_terminal_survives_other_transforms(
        self, ident: Identifier, transform: Callable[[Identifier], Identifier]
    ) -> None:
        assert transform(ident).terminal == ident.terminal

    @pytest.mark.parametrize("ident", ALL_VALUES, ids=str)
    def test_terminal_transforms_keep_other_fields(self, ident: Identifier) -> None:
        for changed in (ident.mark_terminal(), ident.unmark_terminal(), ident.with_terminal(1)):
            assert (changed.type, changed.side, changed.state) == (
                ident.type,
                ident.side,
                ident.state,
            )


class TestWithTransforms:
    def test_chain(self) -> None:
        ident = Identifier(PieceType.K, Side.FIRST).with_type("Q").with_state("enhanced")
        assert str(ident) == "+Q"

    def test_with_side(self) -> None:
        assert str(parse("+R^").with_side(Side.SECOND)) == "+r^"

    def test_with_terminal(self) -> None:
        assert parse("R").with_terminal(True) == parse("R^")
        assert parse("R^").with_terminal(False) == parse("R")

    @pytest.mark.parametrize(
        "method,value",
        [
            ("with_type", "K"),
            ("with_type", PieceType.K),
            ("with_side", "first"),
            ("with_state", State.NORMAL),
            ("with_terminal", False),
            ("with_terminal", 0),
        ],
    )
    def test_equal_value_returns_same_instance(self, method: str, value: object) -> None:
        ident = parse("K")
        assert getattr(ident, method)(value) is ident

    def test_with_type_validates(self) -> None:
        with pytest.raises(InvalidTypeError):
            parse("K").with_type("q")

    def test_with_side_validates(self) -> None:
        with pytest.raises(InvalidSideError):
            parse("K").with_side("third")

    def test_with_state_validates(self) -> None:
        with pytest.raises(InvalidStateError):
            parse("K").with_state("")


class TestImmutability:
    @pytest.mark.parametrize("transform", STATE_SIDE_TYPE_TRANSFORMS)
    def test_original_is_unchanged(
        self, transform: Callable[[Identifier], Identifier]
    ) -> None:
        ident = parse("+R^")
        before = (ident.type, ident.side, ident.state, ident.terminal)
        transform(ident)
        ident.mark_terminal().unmark_terminal().with_terminal(False)
        assert (ident.type, ident.side, ident.state, ident.terminal) == before
        assert str(ident) == "+R^"


class TestQueries:
    def test_state_predicates(self) -> None:
        assert parse("K").is_normal
        assert parse("+K").is_enhanced
        assert parse("-K").is_diminished
        assert not parse("+K").is_normal

    def test_side_predicates(self) -> None:
        assert parse("K").is_first_player
        assert not parse("K").is_second_player
        assert parse("k").is_second_player

    def test_terminal_predicate(self) -> None:
        assert parse("K^").is_terminal
        assert not parse("K").is_terminal

    def test_pairwise_comparisons(self) -> None:
        a = parse("+K^")
        b = parse("-k^")
        assert a.same_type(b)
        assert not a.same_side(b)
        assert not a.same_state(b)
        assert a.same_terminal(b)

    @pytest.mark.parametrize("other", ["K", None, 1, PieceType.K])
    def test_pairwise_with_foreign_value_is_false(self, other: object) -> None:
        ident = parse("K")
        assert ident.same_type(other) is False
        assert ident.same_side(other) is False
        assert ident.same_state(other) is False
        assert ident.same_terminal(other) is False


class TestEquality:
    def test_equal_values(self) -> None:
        assert parse("+R^") == Identifier("R", "first", "enhanced", True)

    @pytest.mark.parametrize("other", ["+R", "+r^", "-R^", "R^", "+B^"])
    def test_any_field_difference_is_unequal(self, other: str) -> None:
        assert parse("+R^") != parse(other)

    def test_not_equal_to_string(self) -> None:
        assert parse("K") != "K"

    def test_hash_agrees_with_equality(self) -> None:
        assert hash(parse("+R^")) == hash(Identifier("R", "first", "enhanced", True))

    def test_usable_in_sets_and_dicts(self) -> None:
        pieces = {parse("K"), parse("K"), parse("k"), parse("K^")}
        assert len(pieces) == 3
        board = {parse("+R"): "c3"}
        assert board[Identifier("R", "first", "enhanced")] == "c3"
