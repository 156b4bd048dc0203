"""Rich Console factory and theme for turtlectl output.

Consoles render into a StringIO buffer so every renderer keeps a
``-> str`` contract.  Rich drops color codes when not writing to a TTY
(tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TURTLE_THEME = Theme(
    {
        "turtle.ok": "bold green",
        "turtle.error": "bold red",
        "turtle.op": "bold cyan",
        "turtle.key": "dim",
        "turtle.source": "dim",
        "turtle.caret": "bold red",
        "turtle.kind.select_pen": "magenta",
        "turtle.kind.pen_down": "green",
        "turtle.kind.pen_up": "yellow",
        "turtle.kind.draw": "bold blue",
    }
)


def create_console() -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TURTLE_THEME,
        highlight=False,
        width=120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


_KIND_STYLES: dict[str, str] = {
    "select_pen": "turtle.kind.select_pen",
    "pen_down": "turtle.kind.pen_down",
    "pen_up": "turtle.kind.pen_up",
    "draw": "turtle.kind.draw",
}


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a command kind."""
    return _KIND_STYLES.get(kind, "")
