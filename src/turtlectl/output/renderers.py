"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO; the caller
extracts the text via ``get_output(console)``.  Renderers are dispatched by
``result.op`` in :func:`render_result`.

Source lines are user text, so they are always wrapped in ``Text`` and never
interpreted as Rich markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, assert_never

from rich.table import Table
from rich.text import Text

from turtlectl.domain.commands import Command, Draw, PenDown, PenUp, SelectPen, load_program
from turtlectl.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from turtlectl.services.result import ServiceResult


# ── Command display ───────────────────────────────────────────────────


def command_parts(command: Command) -> tuple[str, ...]:
    """Split a command into its display name and arguments (``Draw``, ``W``, ``2``)."""
    match command:
        case SelectPen(id=pen):
            return ("SelectPen", str(pen))
        case PenDown():
            return ("PenDown",)
        case PenUp():
            return ("PenUp",)
        case Draw(direction=direction, centimeters=centimeters):
            return ("Draw", direction.value, str(centimeters))
        case _:
            assert_never(command)


def describe_command(command: Command) -> str:
    """One-line compact form, e.g. ``SelectPen 2`` or ``Draw W 2``."""
    return " ".join(command_parts(command))


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, show_source: bool = True) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, show_source=show_source)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    ``parse`` prints one compact command per line, ``check`` the count.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {msg}"

    if result.op == "parse":
        program = load_program(result.data.get("commands", []))
        return "\n".join(describe_command(command) for command in program)
    return str(result.data.get("count", 0))


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    line = Text()
    if result.ok:
        line.append("OK", style="turtle.ok")
    else:
        line.append("ERROR", style="turtle.error")
    line.append(f"  {result.op}", style="turtle.op")
    if result.source:
        line.append(f"  {result.source}", style="turtle.source")
    console.print(line)


# ── Operation renderers ──────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, show_source: bool) -> None:
    _status_line(console, result)
    program = load_program(result.data.get("commands", []))
    if not program:
        console.print(Text("  (no commands)", style="turtle.key"))
        return

    lines: list[str] = result.data.get("lines", [])
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Line", justify="right", style="turtle.key")
    table.add_column("Command")
    table.add_column("Args")
    if show_source:
        table.add_column("Source", style="turtle.source")

    for index, command in enumerate(program):
        name, *args = command_parts(command)
        row = [
            Text(str(index + 1)),
            Text(name, style=style_for_kind(command.kind)),
            Text(" ".join(args)),
        ]
        if show_source:
            row.append(Text(lines[index] if index < len(lines) else ""))
        table.add_row(*row)

    console.print(table)


def _render_check(result: ServiceResult, console: Console, *, show_source: bool) -> None:
    _status_line(console, result)
    console.print(Text(f"  commands: {result.data.get('count', 0)}"))
    for kind, count in sorted(result.data.get("by_kind", {}).items()):
        line = Text("  ")
        line.append(kind, style=style_for_kind(kind))
        line.append(f": {count}")
        console.print(line)


def _render_error(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    if result.error is None:
        console.print(Text("  Unknown error"))
        return

    headline = Text("  ")
    headline.append(result.error.code, style="turtle.error")
    headline.append(f"  {result.error.message}")
    console.print(headline)

    detail: dict[str, Any] = result.error.detail
    if "line_number" not in detail:
        return
    gutter = f"  {detail['line_number']:>4} | "
    console.print(Text(gutter, style="turtle.key") + Text(detail.get("line", "")))
    column = detail.get("column")
    if column:
        pad = " " * (len(gutter) - 2)
        caret = Text(pad + "| ", style="turtle.key")
        caret.append(" " * (column - 1) + "^", style="turtle.caret")
        console.print(caret)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "parse": _render_parse,
    "check": _render_check,
}
