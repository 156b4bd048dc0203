"""ParseService: run the grammar over text or files, report a ServiceResult.

Pipeline: READ → PARSE → RESPOND.  The grammar in ``turtlectl.domain`` is
pure; this layer owns file access, logging, and error-code mapping.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Any

from turtlectl.config.models import ParserConfig
from turtlectl.domain.commands import dump_program
from turtlectl.domain.errors import ParseError
from turtlectl.domain.parsing import parse_program, split_lines
from turtlectl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

READ_FAILED = "READ_FAILED"
EMPTY_PROGRAM_WARNING = "Program contains no commands"


def to_service_error(error: ParseError) -> ServiceError:
    """Map a grammar error to a ServiceError keyed by its kind name."""
    detail: dict[str, Any] = {
        "line_number": error.line_number,
        "line": error.line,
        "column": error.column,
        "offending": error.offending,
    }
    return ServiceError(
        code=error.kind.name,
        message=str(error),
        detail={k: v for k, v in detail.items() if v is not None},
    )


class ParseService:
    """Parses turtle programs and summarizes them.

    ``parse_*`` methods return the full command list; ``check_*`` methods
    only validate and return counts.
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config or ParserConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse_text(self, text: str, *, source: str = "<string>") -> ServiceResult:
        """Parse *text* and return its commands under ``data["commands"]``."""
        return self._run("parse", text, source)

    def check_text(self, text: str, *, source: str = "<string>") -> ServiceResult:
        """Validate *text*; report the command count per kind."""
        return self._run("check", text, source)

    def parse_file(self, path: Path | str) -> ServiceResult:
        return self._run_file("parse", Path(path))

    def check_file(self, path: Path | str) -> ServiceResult:
        return self._run_file("check", Path(path))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run_file(self, op: str, path: Path) -> ServiceResult:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cannot read %s", path, exc_info=True)
            return ServiceResult(
                ok=False,
                op=op,
                source=str(path),
                error=ServiceError(
                    code=READ_FAILED,
                    message=f"Cannot read {path}: {exc}",
                    detail={"path": str(path)},
                ),
            )
        return self._run(op, text, str(path))

    def _run(self, op: str, text: str, source: str) -> ServiceResult:
        logger.debug("%s started: %s", op, source)
        result = parse_program(text, line_numbers=self._config.line_numbers)

        if result.error is not None:
            logger.debug("%s failed: %s (%s)", op, source, result.error.kind.name)
            return ServiceResult(
                ok=False,
                op=op,
                source=source,
                error=to_service_error(result.error),
            )

        program = result.value or []
        logger.debug("%s complete: %s, %d commands", op, source, len(program))

        data: dict[str, Any] = {"count": len(program)}
        if op == "parse":
            data["commands"] = dump_program(program)
            data["lines"] = split_lines(text)
        else:
            data["by_kind"] = dict(Counter(command.kind for command in program))

        warnings = [] if program else [EMPTY_PROGRAM_WARNING]
        return ServiceResult(ok=True, op=op, source=source, data=data, warnings=warnings)
