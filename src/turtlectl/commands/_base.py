"""Shared Click pieces: a Command class with ``--examples`` and the PROGRAM argument."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from turtlectl.services.parse import ParseService
    from turtlectl.services.result import ServiceResult

STDIN = "-"


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TurtleCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


program_argument = click.argument(
    "program",
    type=click.Path(dir_okay=False, allow_dash=True),
)


def run_on_program(svc: ParseService, op: str, program: str) -> ServiceResult:
    """Dispatch *op* (``parse`` or ``check``) on a path or ``-`` for stdin."""
    if program == STDIN:
        text = click.get_text_stream("stdin").read()
        if op == "parse":
            return svc.parse_text(text, source="<stdin>")
        return svc.check_text(text, source="<stdin>")
    if op == "parse":
        return svc.parse_file(program)
    return svc.check_file(program)
