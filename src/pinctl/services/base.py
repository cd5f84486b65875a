"""BaseService — shared foundation for pinctl services.

Every service receives the resolved :class:`PinSettings` at construction
time and turns a rejected input into a failed result with
:meth:`BaseService._fail`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pinctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pinctl.config.settings import PinSettings
    from pinctl.domain.errors import PinError

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class NotationService(BaseService):
            def parse(self, notations: Sequence[str]) -> ServiceResult:
                try:
                    ...
                except PinError as exc:
                    return self._fail("parse", exc)
    """

    def __init__(self, settings: PinSettings) -> None:
        self._settings = settings

    def _fail(self, op: str, exc: PinError, **detail: Any) -> ServiceResult:
        """Convert a domain error into a failed ServiceResult."""
        logger.debug("%s rejected %r: %s", op, exc.value, exc)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc, **detail))
