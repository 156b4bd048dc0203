"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: every public ParseService method returns a ServiceResult; only
the command layer decides how it is printed and what the exit code is.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload.

    ``code`` is the upper-cased ErrorKind name for grammar failures
    (``INVALID_COMMAND`` ...) or ``READ_FAILED`` when the input is unreadable.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"parse"`` or ``"check"``).
        source: Where the program came from (a path, ``<stdin>``, ``<string>``).
        data: Operation-specific payload on success.
        warnings: Non-fatal observations, e.g. an empty program.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    source: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
