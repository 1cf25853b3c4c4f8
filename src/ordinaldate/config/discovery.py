"""Locate ordinaldate.toml.

The file is found by walking up from the working directory. The
ORDINALDATE_CONFIG env var and the --config CLI flag take precedence.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "ordinaldate.toml"
CONFIG_ENV_VAR = "ORDINALDATE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    A set ORDINALDATE_CONFIG wins outright, even when it names a missing
    file; the walk-up only runs when the variable is unset.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
