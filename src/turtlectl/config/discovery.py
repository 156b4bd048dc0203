"""Locate the turtlectl.toml that applies to an invocation.

Lookup order: ``--config`` (handled by the caller), then the TURTLECTL_CONFIG
env var, then the nearest turtlectl.toml in the start directory or one of its
ancestors.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "turtlectl.toml"
CONFIG_ENV_VAR = "TURTLECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A TURTLECTL_CONFIG naming a missing file yields None rather than
    falling back to the directory search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
