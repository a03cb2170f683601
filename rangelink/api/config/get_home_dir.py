"""Get RangeLink home directory path or path under it."""

import os
from pathlib import Path

from ...constants import RANGELINK_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get RangeLink home directory path or path under it.

    Checks the RANGELINK_HOME environment variable first, defaults to
    ~/.rangelink otherwise.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.rangelink")
        >>> get_home_dir("config.json")
        Path("/Users/user/.rangelink/config.json")
    """
    home_env = os.environ.get("RANGELINK_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # HOME first, for test isolation
        user_home = os.environ.get("HOME")
        home = Path(user_home) / RANGELINK_HOME_EXT if user_home else Path.home() / RANGELINK_HOME_EXT

    return home / Path(*parts) if parts else home
