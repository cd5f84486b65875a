"""Typed payload contracts for ServiceResult.data.

Services build these models and dump them with ``model_dump(mode="json")``
so the JSON shape of every operation is declared in one place.
"""

from __future__ import annotations

from pydantic import BaseModel

from pinctl.domain.identifier import Identifier


class IdentifierData(BaseModel):
    """Serialized view of a single Identifier."""

    notation: str
    type: str
    side: str
    state: str
    terminal: bool

    @classmethod
    def from_identifier(cls, identifier: Identifier) -> IdentifierData:
        return cls(
            notation=str(identifier),
            type=identifier.type.value,
            side=identifier.side.value,
            state=identifier.state.value,
            terminal=identifier.terminal,
        )


class CheckItem(BaseModel):
    notation: str
    valid: bool


class ComparisonData(BaseModel):
    """Pairwise field comparison of two identifiers."""

    left: str
    right: str
    equal: bool
    same_type: bool
    same_side: bool
    same_state: bool
    same_terminal: bool
