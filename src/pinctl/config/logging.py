"""Logging setup for the pinctl CLI.

Services log through stdlib ``logging`` under the ``pinctl`` namespace.
structlog formats those records on stderr so stdout only ever carries
command output.  ``--verbose`` opens the namespace to DEBUG and
``--log-json`` switches to one JSON object per line.  Every line is tagged
with the subcommand being run.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

LOGGER_NAME = "pinctl"

_SHARED_PROCESSORS: tuple[Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
)


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=list(_SHARED_PROCESSORS),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    command: str | None = None,
) -> None:
    """Route pinctl logging to stderr.

    Replaces any previous root handler, so repeated calls (one per CLI
    invocation) never duplicate output.

    Args:
        verbose: Log ``pinctl.*`` at DEBUG instead of WARNING.
        log_json: Render JSON lines instead of the console format.
        command: Subcommand name bound to every line as ``command``.
    """
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    structlog.contextvars.clear_contextvars()
    if command:
        structlog.contextvars.bind_contextvars(command=command)

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(log_json)]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
