"""Locate the ``mdfront.toml`` that applies to a working directory."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "mdfront.toml"
CONFIG_ENV_VAR = "MDFRONT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``mdfront.toml`` at or above *start* (default: cwd).

    ``$MDFRONT_CONFIG`` replaces the search entirely; if it names a file
    that does not exist, no config is used.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
