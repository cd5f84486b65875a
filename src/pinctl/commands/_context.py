"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pinctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pinctl.config.settings import PinSettings
    from pinctl.services.notation import NotationService
    from pinctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: PinSettings, *, command: str | None = None) -> None:
        self.settings = settings
        self._service: NotationService | None = None

        from pinctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json, command=command)

    @property
    def service(self) -> NotationService:
        """The notation service (created lazily on first access)."""
        if self._service is None:
            from pinctl.services.notation import NotationService

            self._service = NotationService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr (including a failed check's report),
          exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            no_color=self.settings.output.no_color,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        click.echo(output, err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
