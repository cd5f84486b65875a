"""NotationService — parse, check, format, transform, describe, compare.

Thin orchestration over :mod:`pinctl.domain`: every method turns domain
errors into a failed ServiceResult instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from pinctl.domain.errors import PinError
from pinctl.domain.identifier import Identifier
from pinctl.domain.notation import is_valid
from pinctl.domain.types import Side, State
from pinctl.services.base import BaseService
from pinctl.services.contracts import CheckItem, ComparisonData, IdentifierData
from pinctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class InvalidStepError(PinError):
    """A transform step name or argument is not recognised."""

    code = "INVALID_STEP"
    field = "step"
    template = "Unknown transform step: {value!r}"


# Argument-free steps, in the order they are documented.
SIMPLE_STEPS: dict[str, Callable[[Identifier], Identifier]] = {
    "enhance": Identifier.enhance,
    "diminish": Identifier.diminish,
    "normalize": Identifier.normalize,
    "unenhance": Identifier.unenhance,
    "undiminish": Identifier.undiminish,
    "flip": Identifier.flip,
    "mark-terminal": Identifier.mark_terminal,
    "unmark-terminal": Identifier.unmark_terminal,
}

# ``name=value`` steps.
ASSIGN_STEPS: dict[str, Callable[[Identifier, str], Identifier]] = {
    "type": Identifier.with_type,
    "side": Identifier.with_side,
    "state": Identifier.with_state,
    "terminal": lambda identifier, value: identifier.with_terminal(_parse_flag(value)),
}

_TRUE_FLAGS = frozenset({"true", "yes", "1", "on"})
_FALSE_FLAGS = frozenset({"false", "no", "0", "off"})


def _parse_flag(value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_FLAGS:
        return True
    if lowered in _FALSE_FLAGS:
        return False
    raise InvalidStepError(f"terminal={value}")


def apply_step(identifier: Identifier, step: str) -> Identifier:
    """Apply one named transform step.

    Examples:
        >>> str(apply_step(Identifier.parse("K^"), "flip"))
        'k^'
        >>> str(apply_step(Identifier.parse("p"), "state=enhanced"))
        '+p'

    Raises:
        InvalidStepError: *step* is not a known step.
        PinError: the argument of a ``name=value`` step is out of domain.
    """
    simple = SIMPLE_STEPS.get(step)
    if simple is not None:
        return simple(identifier)

    name, sep, value = step.partition("=")
    assign = ASSIGN_STEPS.get(name)
    if not sep or assign is None:
        raise InvalidStepError(step)
    return assign(identifier, value)


class NotationService(BaseService):
    """PIN operations for the CLI and other interfaces."""

    def parse(self, notations: Sequence[str]) -> ServiceResult:
        """Parse every notation; the first invalid one fails the call."""
        items: list[dict[str, Any]] = []
        for index, text in enumerate(notations):
            try:
                identifier = Identifier.parse(text)
            except PinError as exc:
                return self._fail("parse", exc, index=index)
            items.append(IdentifierData.from_identifier(identifier).model_dump(mode="json"))

        logger.debug("Parsed %d notation(s)", len(items))
        return ServiceResult(ok=True, op="parse", data={"items": items, "count": len(items)})

    def check(self, notations: Sequence[str]) -> ServiceResult:
        """Validate every notation without raising.

        Fails (``INVALID_NOTATION``) when any entry is invalid so callers
        can guard on the exit code. The per-item report is kept in
        ``data`` either way.
        """
        items = [CheckItem(notation=text, valid=is_valid(text)) for text in notations]
        invalid = [item.notation for item in items if not item.valid]
        data = {
            "items": [item.model_dump(mode="json") for item in items],
            "count": len(items),
            "valid_count": len(items) - len(invalid),
            "invalid_count": len(invalid),
        }
        if not invalid:
            return ServiceResult(ok=True, op="check", data=data)

        logger.debug("Rejected %d of %d notation(s)", len(invalid), len(items))
        noun = "notation" if len(invalid) == 1 else "notations"
        return ServiceResult(
            ok=False,
            op="check",
            data=data,
            error=ServiceError(
                code="INVALID_NOTATION",
                message=f"{len(invalid)} invalid {noun}: {', '.join(map(repr, invalid))}",
                detail={"invalid": invalid},
            ),
        )

    def build(
        self,
        piece_type: str,
        side: str = Side.FIRST.value,
        state: str = State.NORMAL.value,
        terminal: bool = False,
    ) -> ServiceResult:
        """Construct an identifier from its fields and format it."""
        try:
            identifier = Identifier(piece_type, side, state, terminal)
        except PinError as exc:
            return self._fail("format", exc)
        return ServiceResult(
            ok=True,
            op="format",
            data=IdentifierData.from_identifier(identifier).model_dump(mode="json"),
        )

    def transform(self, notation: str, steps: Sequence[str]) -> ServiceResult:
        """Parse *notation* and apply *steps* left to right."""
        try:
            identifier = Identifier.parse(notation)
        except PinError as exc:
            return self._fail("transform", exc)

        for index, step in enumerate(steps):
            try:
                identifier = apply_step(identifier, step)
            except PinError as exc:
                return self._fail("transform", exc, index=index, step=step)
            logger.debug("Step %s -> %s", step, identifier)

        data = IdentifierData.from_identifier(identifier).model_dump(mode="json")
        data["input"] = notation
        data["steps"] = list(steps)
        return ServiceResult(ok=True, op="transform", data=data)

    def describe(self, notation: str) -> ServiceResult:
        """Render a human sentence for one notation."""
        try:
            identifier = Identifier.parse(notation)
        except PinError as exc:
            return self._fail("describe", exc)

        data = IdentifierData.from_identifier(identifier).model_dump(mode="json")
        data["description"] = self.describe_identifier(identifier)
        return ServiceResult(ok=True, op="describe", data=data)

    def describe_identifier(self, identifier: Identifier) -> str:
        """Describe *identifier* using the configured piece labels.

        Examples:
            "First player enhanced Rook (terminal)", "Second player type P"
        """
        label = self._settings.pieces.label_for(identifier.type.value)
        words = [f"{identifier.side.value.capitalize()} player"]
        if not identifier.is_normal:
            words.append(identifier.state.value)
        words.append(label or f"type {identifier.type.value}")
        sentence = " ".join(words)
        return f"{sentence} (terminal)" if identifier.terminal else sentence

    def compare(self, left: str, right: str) -> ServiceResult:
        """Compare two notations field by field."""
        try:
            a = Identifier.parse(left)
        except PinError as exc:
            return self._fail("compare", exc, index=0)
        try:
            b = Identifier.parse(right)
        except PinError as exc:
            return self._fail("compare", exc, index=1)

        comparison = ComparisonData(
            left=str(a),
            right=str(b),
            equal=a == b,
            same_type=a.same_type(b),
            same_side=a.same_side(b),
            same_state=a.same_state(b),
            same_terminal=a.same_terminal(b),
        )
        return ServiceResult(ok=True, op="compare", data=comparison.model_dump(mode="json"))
