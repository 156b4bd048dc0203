"""Subcommand modules for turtlectl.

register_commands() imports lazily so ``turtlectl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from turtlectl.commands.check import check
    from turtlectl.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(check)
