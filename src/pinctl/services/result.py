"""Result envelope returned by every NotationService operation.

A result is either a success with an operation payload in ``data`` or a
failure with a :class:`ServiceError`.  ``check`` is the one operation that
fails *with* a payload: the per-notation report stays in ``data`` so the
CLI can still show which entries were rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, model_validator

if TYPE_CHECKING:
    from pinctl.domain.errors import PinError


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` mirrors :attr:`PinError.code`; ``detail`` names the rejected
    field and value plus any operation context (argument index, step).
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: PinError, **detail: Any) -> ServiceError:
        return cls(
            code=exc.code,
            message=str(exc),
            detail={"field": exc.field, "value": _printable(exc.value), **detail},
        )


class ServiceResult(BaseModel):
    """Outcome of one operation (``parse``, ``check``, ``format``, ...).

    ``error`` is set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @model_validator(mode="after")
    def _error_matches_status(self) -> ServiceResult:
        if self.ok and self.error is not None:
            msg = f"successful {self.op!r} result cannot carry an error"
            raise ValueError(msg)
        if not self.ok and self.error is None:
            msg = f"failed {self.op!r} result needs an error"
            raise ValueError(msg)
        return self


def _printable(value: object) -> str:
    """Render an offending input for a JSON-safe error detail."""
    return value if isinstance(value, str) else repr(value)
