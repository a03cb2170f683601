import re

_SAFE_PATH = re.compile(r"[A-Za-z0-9_.\-/:]+")


def needs_quoting(path: str) -> bool:
    """Return True when ``path`` holds any character outside the shell-safe set.

    The safe set is ASCII letters, digits, ``_ . - / :``. An empty path is
    considered safe.
    """
    if not path:
        return False
    return _SAFE_PATH.fullmatch(path) is None
