"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns logging setup, the Fibonacci service, and
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from fibmat.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from fibmat.config.settings import FibSettings
    from fibmat.services.fibonacci import FibonacciService
    from fibmat.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: FibSettings) -> None:
        self.settings = settings
        self._service: FibonacciService | None = None

        from fibmat.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Results routinely exceed the default 4300-digit str() limit.
        sys.set_int_max_str_digits(settings.engine.max_str_digits)

        if settings.verbose:
            from fibmat.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> FibonacciService:
        """The Fibonacci service (created lazily on first access)."""
        if self._service is None:
            from fibmat.services.fibonacci import FibonacciService

            self._service = FibonacciService(self.settings.engine)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        Success goes to stdout; failure goes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
