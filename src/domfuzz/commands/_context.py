"""AppContext — shared Click context for all commands.

Created once by the root group and handed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domfuzz.output.formatters import format_record, format_result
from domfuzz.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from domfuzz.config.settings import DomfuzzSettings
    from domfuzz.domain.models import VariationRecord
    from domfuzz.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DomfuzzSettings) -> None:
        self.settings = settings

        from domfuzz.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from domfuzz.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def streaming(self) -> bool:
        """Whether records are echoed line by line as they are produced."""
        return not self.settings.json_output

    def echo_record(self, record: VariationRecord) -> None:
        click.echo(format_record(record))

    def emit(self, result: ServiceResult, *, streamed: bool = False) -> None:
        """Output a ServiceResult with correct exit semantics.

        * JSON mode: the serialized result goes to stdout.
        * *streamed*: the payload was already echoed, so only the summary
          is written, to stderr, keeping stdout a clean record list.
        * Failure: written to stderr, exit code 1.

        Warnings go to stderr outside JSON mode.
        """
        if not result.ok:
            if self.settings.json_output:
                click.echo(format_result(result, json_output=True), err=True)
            elif self.settings.quiet:
                click.echo(render_quiet(result), err=True)
            else:
                click.echo(render_result(result, verbose=self.settings.verbose), err=True)
            raise SystemExit(1)

        if self.settings.json_output:
            click.echo(format_result(result, json_output=True))
            return

        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

        if self.settings.quiet:
            output = render_quiet(result)
            if output:
                click.echo(output, err=streamed)
        else:
            click.echo(render_result(result, verbose=self.settings.verbose), err=streamed)
