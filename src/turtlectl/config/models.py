"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, turtlectl.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- turtlectl.toml sections ---


class ParserConfig(BaseModel):
    """[parser] section."""

    model_config = {"frozen": True}

    # Annotate document errors with the 1-based line number and line text.
    line_numbers: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    json_indent: int = Field(default=2, ge=0)
    show_source: bool = True
