"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Configures logging and centralizes result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from turtlectl.config.logging import configure_logging
from turtlectl.output.formatters import OutputSettings, format_result
from turtlectl.services.parse import ParseService

if TYPE_CHECKING:
    from turtlectl.config.settings import TurtleSettings
    from turtlectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TurtleSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def parser(self) -> ParseService:
        """A ParseService configured from the ``[parser]`` section."""
        return ParseService(self.settings.parser)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.  Warnings go to stderr so they don't
          pollute piped output (in JSON mode they are already in the payload).
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            json_indent=self.settings.output.json_indent,
            show_source=self.settings.output.show_source,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
