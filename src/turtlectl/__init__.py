"""turtlectl: parse line-oriented turtle-graphics programs into typed commands."""

from turtlectl.domain.commands import (
    Command,
    Draw,
    PenDown,
    PenUp,
    Program,
    SelectPen,
    dump_program,
    load_program,
)
from turtlectl.domain.errors import ParseError, ParseResult, TurtleSyntaxError
from turtlectl.domain.parsing import decode_direction, parse_line, parse_program
from turtlectl.domain.types import Direction, ErrorKind

__version__ = "0.1.0"

__all__ = [
    "Command",
    "Direction",
    "Draw",
    "ErrorKind",
    "ParseError",
    "ParseResult",
    "PenDown",
    "PenUp",
    "Program",
    "SelectPen",
    "TurtleSyntaxError",
    "__version__",
    "decode_direction",
    "dump_program",
    "load_program",
    "parse_line",
    "parse_program",
]
