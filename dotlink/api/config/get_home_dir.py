"""Get the home directory dotlink installs into by default."""

import os
from pathlib import Path

from ...constants import DOTLINK_HOME_ENV
from .normalize_path import normalize_path


def get_home_dir(*parts: str) -> Path:
    """Get the default user home directory, or a path under it.

    Checks the DOTLINK_HOME environment variable first, then HOME,
    then falls back to ``Path.home()``.

    Examples:
        >>> get_home_dir()
        Path("/Users/user")
        >>> get_home_dir("logs")
        Path("/Users/user/logs")
    """
    home_env = os.environ.get(DOTLINK_HOME_ENV) or os.environ.get("HOME")
    home = normalize_path(home_env) if home_env else Path.home()
    return home / Path(*parts) if parts else home
