import re

_QUOTED = re.compile(r"'((?:'\\''|[^'])*)'")


def unquote_path(text: str) -> str:
    """Inverse of ``quote_path`` / ``quote_link``.

    Text that is not a single POSIX-quoted word is returned unchanged.
    """
    match = _QUOTED.fullmatch(text)
    if match is None:
        return text
    return match.group(1).replace("'\\''", "'")
