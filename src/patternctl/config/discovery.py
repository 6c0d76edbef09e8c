"""Locate patternctl.toml.

Resolution order: the PATTERNCTL_CONFIG env var, then a walk up the
directory tree from the starting point (like git looking for .git/).
An explicit ``--config`` flag bypasses discovery altogether.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "patternctl.toml"
CONFIG_ENV_VAR = "PATTERNCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest patternctl.toml at or above *start*, or None.

    A PATTERNCTL_CONFIG value that does not point at a file disables
    discovery instead of falling back to the walk-up.
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
