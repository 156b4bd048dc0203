"""Command models: the typed output of the line grammar.

Each variant is a frozen pydantic model tagged by ``kind``.  ``Command`` is
the discriminated union over all four, so a program dumped with
:func:`dump_program` validates straight back into the right variants.

INVARIANT: a Command only exists fully formed.  Numeric fields are bounded
to the unsigned 32-bit range the grammar accepts.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from turtlectl.domain.types import Direction

U32_MAX = 2**32 - 1


class SelectPen(BaseModel):
    """``P <id>``: subsequent draws use pen *id*."""

    model_config = {"frozen": True}

    kind: Literal["select_pen"] = "select_pen"
    id: int = Field(ge=0, le=U32_MAX)


class PenDown(BaseModel):
    """``D``: lower the pen."""

    model_config = {"frozen": True}

    kind: Literal["pen_down"] = "pen_down"


class PenUp(BaseModel):
    """``U``: raise the pen."""

    model_config = {"frozen": True}

    kind: Literal["pen_up"] = "pen_up"


class Draw(BaseModel):
    """``W|N|E|S <cm>``: move *centimeters* in *direction*."""

    model_config = {"frozen": True}

    kind: Literal["draw"] = "draw"
    direction: Direction
    centimeters: int = Field(ge=0, le=U32_MAX)


Command = Annotated[SelectPen | PenDown | PenUp | Draw, Field(discriminator="kind")]

# One Command per source line, in source order.
Program = list[Command]

_PROGRAM_ADAPTER: TypeAdapter[Program] = TypeAdapter(Program)


def dump_program(program: Program) -> list[dict[str, Any]]:
    """Convert a program to JSON-ready dicts (directions as their letters)."""
    return _PROGRAM_ADAPTER.dump_python(program, mode="json")


def load_program(data: list[dict[str, Any]]) -> Program:
    """Validate dumped dicts back into Command variants.

    Raises ``pydantic.ValidationError`` on unknown kinds or out-of-range values.
    """
    return _PROGRAM_ADAPTER.validate_python(data)
