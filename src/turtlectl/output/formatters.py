"""Output mode dispatch.

The CLI prints a ServiceResult for humans (Rich tables and error carets),
for scripts (``--quiet``: one compact command per line), or for machines
(``--json``: the ServiceResult itself).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from turtlectl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from turtlectl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags; ``json_output`` wins over ``quiet``."""

    json_output: bool = False
    quiet: bool = False
    json_indent: int = 2
    show_source: bool = True


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=settings.json_indent or None)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, show_source=settings.show_source)
