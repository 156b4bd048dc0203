"""Parse errors and the success-or-error result carried out of the grammar.

Parsing functions never raise on malformed input.  They return a
:class:`ParseResult` holding either a value or a :class:`ParseError`, and
callers that prefer exceptions opt in with :meth:`ParseResult.unwrap`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from turtlectl.domain.types import ErrorKind

_T = TypeVar("_T")


@dataclass(frozen=True)
class ParseError:
    """What went wrong, and where when the document driver knows it.

    Attributes:
        kind: Programmatic classification of the failure.
        message: Human-readable description naming the bad input.
        offending: The offending character or token, if there is one.
        column: 1-based column where the offending text starts.
        line_number: 1-based source line, set only by the document driver.
        line: Raw text of that line.
    """

    kind: ErrorKind
    message: str
    offending: str | None = None
    column: int | None = None
    line_number: int | None = None
    line: str | None = None

    def at_line(self, line_number: int, line: str) -> ParseError:
        """Return a copy annotated with its source position."""
        return replace(self, line_number=line_number, line=line)

    def at_column(self, column: int) -> ParseError:
        return replace(self, column=column)

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"Line {self.line_number}: {self.message}"


class TurtleSyntaxError(ValueError):
    """Raised by :meth:`ParseResult.unwrap` when the result holds an error."""

    def __init__(self, error: ParseError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


@dataclass(frozen=True)
class ParseResult(Generic[_T]):
    """Either a parsed *value* or the *error* that prevented it."""

    value: _T | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: _T) -> ParseResult[_T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ParseError) -> ParseResult[_T]:
        return cls(error=error)

    def unwrap(self) -> _T:
        """Return the value, or raise :class:`TurtleSyntaxError`."""
        if self.error is not None:
            raise TurtleSyntaxError(self.error)
        return self.value  # type: ignore[return-value]
