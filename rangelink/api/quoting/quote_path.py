from .needs_quoting import needs_quoting


def quote_path(path: str) -> str:
    """Wrap ``path`` in POSIX single quotes when it needs quoting.

    Embedded single quotes become ``'\\''`` (close, escaped quote, reopen).
    """
    if not needs_quoting(path):
        return path
    return "'" + path.replace("'", "'\\''") + "'"
