from .needs_quoting import needs_quoting


def quote_link(link: str, path: str) -> str:
    """Quote a complete link when its path needs quoting.

    The decision is made from ``path`` alone so the range part never causes
    a safe path to be quoted.
    """
    if not needs_quoting(path):
        return link
    return "'" + link.replace("'", "'\\''") + "'"
