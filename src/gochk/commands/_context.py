"""AppContext — shared state handed to subcommands through ``ctx.obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gochk.config.logging import configure_logging
from gochk.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gochk.config.settings import GochkSettings
    from gochk.services.result import ServiceResult

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 1


class AppContext:
    """Settings plus output/exit-code policy for one CLI invocation."""

    def __init__(self, settings: GochkSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            from gochk.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit non-zero on failure or violations.

        * Failure: output to stderr, exit 1.
        * Violations found: output to stdout, exit 1.
        * Clean: output to stdout, normal return.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(EXIT_ERROR)

        click.echo(output)
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if result.violation_count:
            raise SystemExit(EXIT_VIOLATIONS)
