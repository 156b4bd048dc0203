"""Command: parse a program and print its commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from turtlectl.commands._base import TurtleCommand, program_argument, run_on_program

if TYPE_CHECKING:
    from turtlectl.commands._context import AppContext


@click.command(
    cls=TurtleCommand,
    examples="""\
  turtlectl parse square.turtle
  turtlectl --json parse square.turtle
  turtlectl -q parse square.turtle
  cat square.turtle | turtlectl parse -""",
)
@program_argument
@click.pass_obj
def parse(app: AppContext, program: str) -> None:
    """Parse PROGRAM (a file, or - for stdin) and print its commands."""
    app.emit(run_on_program(app.parser, "parse", program))
