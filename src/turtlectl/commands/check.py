"""Command: validate a program without printing its commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from turtlectl.commands._base import TurtleCommand, program_argument, run_on_program

if TYPE_CHECKING:
    from turtlectl.commands._context import AppContext


@click.command(
    cls=TurtleCommand,
    examples="""\
  turtlectl check square.turtle
  turtlectl -q check square.turtle
  turtlectl --json check -""",
)
@program_argument
@click.pass_obj
def check(app: AppContext, program: str) -> None:
    """Check that PROGRAM parses; report the command count.

    Exits with status 1 on the first malformed line.
    """
    app.emit(run_on_program(app.parser, "check", program))
