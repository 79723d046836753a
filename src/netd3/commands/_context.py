"""AppContext — shared Click context for all commands.

Created once by the root group; subcommands receive it via
``@click.pass_obj``. Owns result emission (stdout/stderr routing and exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from netd3.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from netd3.config.settings import NetSettings
    from netd3.services.result import ServiceResult


class AppContext:
    """Settings plus output helpers for one CLI invocation."""

    def __init__(self, settings: NetSettings) -> None:
        self.settings = settings

        from netd3.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            indent=self.settings.output.indent,
        )

    def emit(self, result: ServiceResult) -> None:
        """Write a result; failures go to stderr and exit with code 1."""
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
