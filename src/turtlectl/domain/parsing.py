"""Line grammar: direction decoding, single-line parsing, document driver.

Grammar, one instruction per line::

    line        := instruction [ " " trailing-ignored ]
    instruction := "D" | "U" | "P" WS number | direction WS number
    direction   := "W" | "N" | "E" | "S"
    number      := digit+            (unsigned 32-bit)

Nothing after the numeric token (or after ``D``/``U``) is ever inspected,
which is what lets a line carry a trailing ``# comment``.  Leading
whitespace is not trimmed.

All three entry points are pure and return a :class:`ParseResult`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from turtlectl.domain.commands import (
    U32_MAX,
    Command,
    Draw,
    PenDown,
    PenUp,
    Program,
    SelectPen,
)
from turtlectl.domain.errors import ParseError, ParseResult
from turtlectl.domain.types import Direction, ErrorKind

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_DIRECTIONS: dict[str, Direction] = {d.value: d for d in Direction}

# str.isspace() also accepts the ASCII information separators, which are not
# Unicode White_Space and so cannot end a token.
_INFO_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_token_break(char: str) -> bool:
    return char.isspace() and char not in _INFO_SEPARATORS


@dataclass
class LineCursor:
    """Read position over the characters of a single line."""

    line: str
    pos: int = 0

    def advance(self) -> str | None:
        """Consume and return the next character, or None at end of line."""
        if self.pos >= len(self.line):
            return None
        char = self.line[self.pos]
        self.pos += 1
        return char

    def skip_separator(self) -> None:
        """Consume exactly one character, whatever it is."""
        self.advance()

    def take_token(self) -> str:
        """Consume the maximal run of characters up to Unicode whitespace."""
        start = self.pos
        while self.pos < len(self.line) and not _is_token_break(self.line[self.pos]):
            self.pos += 1
        return self.line[start : self.pos]


# ---------------------------------------------------------------------------
# Leaf decoders
# ---------------------------------------------------------------------------


def decode_direction(char: str) -> ParseResult[Direction]:
    """Map ``W``/``N``/``E``/``S`` to a :class:`Direction`."""
    direction = _DIRECTIONS.get(char)
    if direction is None:
        return ParseResult.failure(
            ParseError(
                kind=ErrorKind.INVALID_DIRECTION,
                message=f"Invalid direction {char!r}",
                offending=char,
            )
        )
    return ParseResult.success(direction)


def _number_error(token: str, reason: str) -> ParseResult[int]:
    if token:
        message = f"Invalid number {token!r}: {reason}"
    else:
        message = f"Missing number: {reason}"
    return ParseResult.failure(
        ParseError(kind=ErrorKind.INVALID_NUMBER, message=message, offending=token)
    )


def parse_number(token: str) -> ParseResult[int]:
    """Parse an unsigned 32-bit decimal token (ASCII digits only, no sign)."""
    if not token:
        return _number_error(token, "cannot parse integer from empty string")
    if not (token.isascii() and token.isdigit()):
        return _number_error(token, "invalid digit found in string")
    value = int(token)
    if value > U32_MAX:
        return _number_error(token, "number too large to fit in target type")
    return ParseResult.success(value)


def _read_number(cursor: LineCursor) -> ParseResult[int]:
    cursor.skip_separator()
    column = cursor.pos + 1
    result = parse_number(cursor.take_token())
    if result.error is not None:
        return ParseResult.failure(result.error.at_column(column))
    return result


# ---------------------------------------------------------------------------
# Line and document parsing
# ---------------------------------------------------------------------------


def parse_line(line: str) -> ParseResult[Command]:
    """Parse one line (without its line terminator) into a Command."""
    cursor = LineCursor(line)
    head = cursor.advance()
    if head is None:
        return ParseResult.failure(
            ParseError(kind=ErrorKind.EMPTY_LINE, message="line should not be empty", column=1)
        )

    match head:
        case "D":
            return ParseResult.success(PenDown())
        case "U":
            return ParseResult.success(PenUp())
        case "P":
            pen = _read_number(cursor)
            if pen.error is not None:
                return ParseResult.failure(pen.error)
            return ParseResult.success(SelectPen(id=pen.value))
        case "W" | "N" | "E" | "S":
            direction = decode_direction(head)
            if direction.error is not None:
                return ParseResult.failure(direction.error.at_column(1))
            distance = _read_number(cursor)
            if distance.error is not None:
                return ParseResult.failure(distance.error)
            return ParseResult.success(
                Draw(direction=direction.value, centimeters=distance.value)
            )
        case _:
            return ParseResult.failure(
                ParseError(
                    kind=ErrorKind.INVALID_COMMAND,
                    message=f"Invalid command {head!r}",
                    offending=head,
                    column=1,
                )
            )


def split_lines(text: str) -> list[str]:
    """Split on ``\\n``, ``\\r\\n`` or ``\\r``, dropping the terminators.

    A single trailing line break does not produce an extra empty line.
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_program(text: str, *, line_numbers: bool = True) -> ParseResult[Program]:
    """Parse a whole document, stopping at the first malformed line.

    On failure no commands are returned.  With *line_numbers* the error is
    annotated with its 1-based line number and the raw line text.
    """
    program: Program = []
    for number, line in enumerate(split_lines(text), start=1):
        result = parse_line(line)
        if result.error is not None:
            error = result.error.at_line(number, line) if line_numbers else result.error
            return ParseResult.failure(error)
        program.append(result.value)
    return ParseResult.success(program)
