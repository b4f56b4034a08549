"""Locate userctl.toml.

``USERCTL_CONFIG`` names the file explicitly. Otherwise the search walks
from the start directory towards the filesystem root and stops at the
first userctl.toml.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "userctl.toml"
CONFIG_ENV_VAR = "USERCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the userctl.toml that applies to *start* (default: cwd), if any.

    A ``USERCTL_CONFIG`` pointing at a missing file disables the walk-up.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (origin, *origin.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )
