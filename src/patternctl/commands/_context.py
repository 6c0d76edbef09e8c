"""AppContext — shared state flowing through Click's command hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings
    from patternctl.domain.connection import ConnectionGuard
    from patternctl.services.result import ServiceResult


class AppContext:
    """Per-process context passed to subcommands via ``@click.pass_obj``.

    Owns the single :class:`ConnectionGuard` handle, created on first
    access so commands that never touch it never build it.
    """

    def __init__(self, settings: PatternSettings) -> None:
        self.settings = settings
        self._connection: ConnectionGuard | None = None

        from patternctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from patternctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def connection(self) -> ConnectionGuard:
        """The connection guard (created lazily on first access)."""
        if self._connection is None:
            from patternctl.domain.connection import ConnectionGuard

            self._connection = ConnectionGuard(self.settings.connection.name)
        return self._connection

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, returns normally.  Warnings go to stderr unless
          they are already part of the JSON payload.
        * Failure: stderr, exit code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
