"""Config file discovery.

The finder locates recordctl.toml in the start directory or its nearest
ancestor, similar to how git finds .git/. ``RECORDCTL_CONFIG`` (and the
``--config`` CLI flag, handled in settings) bypass the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "recordctl.toml"
CONFIG_ENV_VAR = "RECORDCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest recordctl.toml at or above *start* (default: cwd).

    When RECORDCTL_CONFIG is set it wins outright: its path is returned if
    it names a file, otherwise None (no fallback to the search).
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
