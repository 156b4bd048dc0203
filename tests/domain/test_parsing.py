"""Tests for the line grammar: direction decoding, lines, whole programs."""

from __future__ import annotations

import random
import string

import pytest

from turtlectl.domain.commands import Draw, PenDown, PenUp, SelectPen
from turtlectl.domain.parsing import (
    LineCursor,
    decode_direction,
    parse_line,
    parse_number,
    parse_program,
    split_lines,
)
from turtlectl.domain.types import Direction, ErrorKind

INSTRUCTION_CHARS = set("DUPWNES")
DIRECTION_CHARS = {
    "W": Direction.WEST,
    "N": Direction.NORTH,
    "E": Direction.EAST,
    "S": Direction.SOUTH,
}

# Printable ASCII plus a few non-ASCII and control characters.
CHARACTER_SAMPLE = sorted(set(string.printable) | {"é", "Ω", " ", "\x00", "ｗ"})


class TestLineCursor:
    def test_advance_walks_characters(self) -> None:
        cursor = LineCursor("ab")
        assert cursor.advance() == "a"
        assert cursor.advance() == "b"
        assert cursor.advance() is None

    def test_take_token_stops_at_whitespace(self) -> None:
        cursor = LineCursor("12 # comment")
        assert cursor.take_token() == "12"
        assert cursor.pos == 2

    @pytest.mark.parametrize("space", ["\t", "\x0b", "\x0c", "\x85", "\xa0", "\u2028", "\u3000"])
    def test_take_token_stops_at_unicode_whitespace(self, space: str) -> None:
        assert LineCursor(f"12{space}3").take_token() == "12"

    @pytest.mark.parametrize("separator", ["\x1c", "\x1d", "\x1e", "\x1f"])
    def test_information_separators_stay_in_token(self, separator: str) -> None:
        assert LineCursor(f"12{separator}3 x").take_token() == f"12{separator}3"

    def test_take_token_runs_to_end(self) -> None:
        cursor = LineCursor("123")
        assert cursor.take_token() == "123"

    def test_skip_separator_at_end_is_noop(self) -> None:
        cursor = LineCursor("W", pos=1)
        cursor.skip_separator()
        assert cursor.pos == 1
        assert cursor.take_token() == ""


class TestDecodeDirection:
    @pytest.mark.parametrize("char,expected", sorted(DIRECTION_CHARS.items()))
    def test_valid(self, char: str, expected: Direction) -> None:
        result = decode_direction(char)
        assert result.ok
        assert result.value is expected

    @pytest.mark.parametrize("char", [c for c in CHARACTER_SAMPLE if c not in DIRECTION_CHARS])
    def test_everything_else_fails(self, char: str) -> None:
        result = decode_direction(char)
        assert result.error is not None
        assert result.error.kind is ErrorKind.INVALID_DIRECTION
        assert result.error.offending == char
        assert repr(char) in result.error.message

    def test_multi_character_fails(self) -> None:
        assert decode_direction("WN").error is not None


class TestParseNumber:
    @pytest.mark.parametrize(
        "token,expected",
        [("0", 0), ("7", 7), ("007", 7), ("4294967295", 4294967295)],
    )
    def test_valid(self, token: str, expected: int) -> None:
        assert parse_number(token).value == expected

    @pytest.mark.parametrize(
        "token,reason",
        [
            ("", "cannot parse integer from empty string"),
            ("2x", "invalid digit found in string"),
            ("-1", "invalid digit found in string"),
            ("+1", "invalid digit found in string"),
            ("1_000", "invalid digit found in string"),
            ("١٢", "invalid digit found in string"),
            ("4294967296", "number too large to fit in target type"),
        ],
    )
    def test_invalid(self, token: str, reason: str) -> None:
        error = parse_number(token).error
        assert error is not None
        assert error.kind is ErrorKind.INVALID_NUMBER
        assert reason in error.message


class TestParseLine:
    def test_pen_down(self) -> None:
        assert parse_line("D").value == PenDown()

    def test_pen_up(self) -> None:
        assert parse_line("U").value == PenUp()

    def test_pen_commands_ignore_trailing_text(self) -> None:
        assert parse_line("D    # pen down").value == PenDown()
        assert parse_line("Ux").value == PenUp()

    def test_select_pen(self) -> None:
        assert parse_line("P 2").value == SelectPen(id=2)

    @pytest.mark.parametrize("char,direction", sorted(DIRECTION_CHARS.items()))
    def test_draw(self, char: str, direction: Direction) -> None:
        assert parse_line(f"{char} 3").value == Draw(direction=direction, centimeters=3)

    def test_trailing_comment_ignored(self) -> None:
        assert parse_line("W 2  # draw west 2cm").value == Draw(
            direction=Direction.WEST, centimeters=2
        )

    def test_text_after_token_never_inspected(self) -> None:
        assert parse_line("P 5 x y z ???").value == SelectPen(id=5)

    def test_zero_distance(self) -> None:
        assert parse_line("N 0").value == Draw(direction=Direction.NORTH, centimeters=0)

    def test_separator_is_any_single_character(self) -> None:
        assert parse_line("W12").value == Draw(direction=Direction.WEST, centimeters=2)
        assert parse_line("P\t9").value == SelectPen(id=9)

    def test_number_ends_at_tab(self) -> None:
        assert parse_line("E 4\t# tab comment").value == Draw(
            direction=Direction.EAST, centimeters=4
        )

    def test_empty_line(self) -> None:
        error = parse_line("").error
        assert error is not None
        assert error.kind is ErrorKind.EMPTY_LINE

    @pytest.mark.parametrize("char", [c for c in CHARACTER_SAMPLE if c not in INSTRUCTION_CHARS])
    def test_unknown_leading_character(self, char: str) -> None:
        error = parse_line(f"{char} 5").error
        assert error is not None
        assert error.kind is ErrorKind.INVALID_COMMAND
        assert error.offending == char
        assert error.column == 1

    def test_invalid_command_names_character(self) -> None:
        error = parse_line("X 5").error
        assert error is not None
        assert "X" in error.message

    def test_lowercase_is_not_an_instruction(self) -> None:
        error = parse_line("w 2").error
        assert error is not None
        assert error.kind is ErrorKind.INVALID_COMMAND

    def test_leading_whitespace_fails(self) -> None:
        error = parse_line(" D").error
        assert error is not None
        assert error.kind is ErrorKind.INVALID_COMMAND

    @pytest.mark.parametrize("line", ["W", "W ", "P", "P ", "S  2"])
    def test_missing_number(self, line: str) -> None:
        error = parse_line(line).error
        assert error is not None
        assert error.kind is ErrorKind.INVALID_NUMBER

    def test_non_digit_token(self) -> None:
        error = parse_line("W 2x").error
        assert error is not None
        assert error.kind is ErrorKind.INVALID_NUMBER
        assert error.offending == "2x"
        assert error.column == 3

    def test_information_separator_is_not_a_terminator(self) -> None:
        error = parse_line("W 2\x1c").error
        assert error is not None
        assert error.kind is ErrorKind.INVALID_NUMBER
        assert error.offending == "2\x1c"
        assert "invalid digit" in error.message

    def test_overflow(self) -> None:
        error = parse_line("P 99999999999").error
        assert error is not None
        assert error.kind is ErrorKind.INVALID_NUMBER
        assert "too large" in error.message

    def test_line_level_errors_have_no_line_number(self) -> None:
        error = parse_line("X").error
        assert error is not None
        assert error.line_number is None


def _generated_lines(count: int = 200, seed: int = 20261019) -> list[tuple[str, object]]:
    """Random valid lines paired with the command they must parse to."""
    rng = random.Random(seed)
    comments = ["", " # comment", "  # draw it", "\tnote", " x y z"]
    cases: list[tuple[str, object]] = []
    for _ in range(count):
        shape = rng.choice(["P", "D", "U", "draw"])
        comment = rng.choice(comments)
        number = rng.choice([0, 1, rng.randrange(2, 10_000), rng.randrange(0, 2**32)])
        if shape == "P":
            cases.append((f"P {number}{comment}", SelectPen(id=number)))
        elif shape == "D":
            cases.append((f"D{comment}", PenDown()))
        elif shape == "U":
            cases.append((f"U{comment}", PenUp()))
        else:
            char, direction = rng.choice(sorted(DIRECTION_CHARS.items()))
            expected = Draw(direction=direction, centimeters=number)
            cases.append((f"{char} {number}{comment}", expected))
    return cases


@pytest.mark.parametrize("line,expected", _generated_lines())
def test_generated_lines_parse_to_their_fields(line: str, expected: object) -> None:
    assert parse_line(line).value == expected


class TestSplitLines:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", []),
            ("D", ["D"]),
            ("D\n", ["D"]),
            ("D\nU", ["D", "U"]),
            ("D\r\nU\r\n", ["D", "U"]),
            ("D\rU", ["D", "U"]),
            ("\n", [""]),
            ("D\n\nU", ["D", "", "U"]),
            ("D\n\n", ["D", ""]),
        ],
    )
    def test_split(self, text: str, expected: list[str]) -> None:
        assert split_lines(text) == expected


class TestParseProgram:
    def test_sample_program(self, sample_program: str) -> None:
        result = parse_program(sample_program)
        assert result.ok
        assert result.value == [
            SelectPen(id=2),
            PenDown(),
            Draw(direction=Direction.WEST, centimeters=2),
            Draw(direction=Direction.NORTH, centimeters=1),
            Draw(direction=Direction.EAST, centimeters=2),
            Draw(direction=Direction.SOUTH, centimeters=1),
            PenUp(),
        ]

    def test_empty_document(self) -> None:
        result = parse_program("")
        assert result.ok
        assert result.value == []

    def test_crlf_document(self) -> None:
        assert parse_program("P 1\r\nD\r\nW 3\r\n").value == [
            SelectPen(id=1),
            PenDown(),
            Draw(direction=Direction.WEST, centimeters=3),
        ]

    @pytest.mark.parametrize("position", [0, 3, 6])
    def test_blank_line_fails_whole_parse(self, sample_program: str, position: int) -> None:
        lines = sample_program.split("\n")
        lines.insert(position, "")
        result = parse_program("\n".join(lines))
        assert result.value is None
        assert result.error is not None
        assert result.error.kind is ErrorKind.EMPTY_LINE
        assert result.error.line_number == position + 1

    def test_invalid_command_document(self) -> None:
        result = parse_program("X 5")
        assert result.value is None
        assert result.error is not None
        assert result.error.kind is ErrorKind.INVALID_COMMAND
        assert "X" in str(result.error)

    def test_first_error_wins(self) -> None:
        result = parse_program("D\nW 2x\nQ\n")
        assert result.error is not None
        assert result.error.kind is ErrorKind.INVALID_NUMBER
        assert result.error.line_number == 2
        assert result.error.line == "W 2x"
        assert str(result.error).startswith("Line 2: ")

    def test_line_numbers_disabled(self) -> None:
        result = parse_program("D\nX", line_numbers=False)
        assert result.error is not None
        assert result.error.line_number is None
        assert result.error.line is None
        assert str(result.error) == "Invalid command 'X'"

    def test_unwrap_returns_list(self, sample_program: str) -> None:
        assert len(parse_program(sample_program).unwrap()) == 7

    def test_results_are_independent(self) -> None:
        first = parse_program("D").unwrap()
        first.append(PenUp())
        assert parse_program("D").unwrap() == [PenDown()]
