"""Shared pytest fixtures for turtlectl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

SAMPLE_PROGRAM = """\
P 2  # select pen 2
D    # pen down
W 2  # draw west 2cm
N 1  # then north 1
E 2  # then east 2
S 1  # then back south
U    # pen up"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_program() -> str:
    """The seven-line square-ish program used across test modules."""
    return SAMPLE_PROGRAM


@pytest.fixture
def program_file(tmp_path: Path) -> Path:
    """SAMPLE_PROGRAM written to disk with a trailing newline."""
    path = tmp_path / "square.turtle"
    path.write_text(SAMPLE_PROGRAM + "\n", encoding="utf-8")
    return path


@pytest.fixture
def broken_file(tmp_path: Path) -> Path:
    """A program whose third line has an unknown instruction."""
    path = tmp_path / "broken.turtle"
    path.write_text("P 1\nD\nX 5\nU\n", encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp dir with no TURTLECTL_* overrides.

    Keeps a developer's own turtlectl.toml out of CLI and settings tests.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TURTLECTL_CONFIG", raising=False)
