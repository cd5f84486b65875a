"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pinctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from pinctl.domain.errors import InvalidTypeError
from pinctl.domain.types import coerce_type


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, gt=0)
    no_color: bool = False


class PiecesConfig(BaseModel):
    """[pieces] section.

    ``labels`` maps type letters to display names used by ``describe``::

        [pieces.labels]
        K = "King"
        R = "Rook"
    """

    model_config = {"frozen": True}

    labels: dict[str, str] = Field(default_factory=dict)

    @field_validator("labels")
    @classmethod
    def _canonical_letters(cls, value: dict[str, str]) -> dict[str, str]:
        labels: dict[str, str] = {}
        for key, label in value.items():
            try:
                piece_type = coerce_type(key.upper())
            except InvalidTypeError as exc:
                msg = f"Invalid piece label key: {exc}"
                raise ValueError(msg) from exc
            labels[piece_type.value] = label
        return labels

    def label_for(self, letter: str) -> str | None:
        """Return the configured display name for a type letter, if any."""
        return self.labels.get(letter)


class PinConfig(BaseModel):
    """Root config model representing a full pinctl.toml."""

    model_config = {"frozen": True}

    output: OutputConfig = Field(default_factory=OutputConfig)
    pieces: PiecesConfig = Field(default_factory=PiecesConfig)
