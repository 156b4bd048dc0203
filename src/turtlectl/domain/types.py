"""Closed enumerations used by the turtle grammar."""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Compass direction of a draw instruction, valued by its source letter."""

    WEST = "W"
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"


class ErrorKind(StrEnum):
    """The four ways a line can fail to parse."""

    EMPTY_LINE = "empty_line"
    INVALID_DIRECTION = "invalid_direction"
    INVALID_COMMAND = "invalid_command"
    INVALID_NUMBER = "invalid_number"
