from ..delimiter.DelimiterConfig import DelimiterConfig
from .escape_regex import escape_regex

# ASCII only; \d would also accept other Unicode digits
_DIGITS = "[0-9]+"


def build_range_source(delimiters: DelimiterConfig) -> str:
    """Regex source for everything after the path: ``#L10C5-L20C10`` or ``##L10``.

    Named groups: ``hash``, ``start_line``, ``start_char``, ``end_line``,
    ``end_char``. The hash may appear once or twice (rectangular).
    """
    hash_ = escape_regex(delimiters.hash)
    line = escape_regex(delimiters.line)
    position = escape_regex(delimiters.position)
    range_ = escape_regex(delimiters.range)

    return (
        f"(?P<hash>(?:{hash_}){{1,2}})"
        f"{line}(?P<start_line>{_DIGITS})(?:{position}(?P<start_char>{_DIGITS}))?"
        f"(?:{range_}{line}(?P<end_line>{_DIGITS})(?:{position}(?P<end_char>{_DIGITS}))?)?"
    )
