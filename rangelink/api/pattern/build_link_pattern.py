"""Regex for finding RangeLinks inside free text."""

import re

from ...constants import PORTABLE_METADATA_SEPARATOR
from ..delimiter.DelimiterConfig import DelimiterConfig
from .build_range_source import build_range_source
from .escape_regex import escape_regex

# A link never starts in the middle of a URL...
NOT_AFTER_URL_CHAR = r"(?<![a-zA-Z0-9:/._?&=%~-])"
# ...nor at a web URL scheme. file:// and Windows drive paths stay allowed.
NO_WEB_URL_SCHEME = r"(?![hH][tT][tT][pP][sS]?://|[fF][tT][pP]://)"
# Opening brackets and quotes are punctuation around a link, not part of its path
NOT_OPENING_PUNCTUATION = r"(?![(\[{<\"'`])"

QUOTED_PATH_SOURCE = r"'(?:'\\''|[^'\n])+'"


def build_link_pattern(delimiters: DelimiterConfig) -> re.Pattern[str]:
    """Compile the detection regex for ``delimiters``; use it with ``finditer``.

    The path is either a POSIX single-quoted path or a run of non-whitespace.
    With a one-character hash the unquoted path is matched non-greedily, so
    ``file#1.ts#L10`` yields ``file#1.ts``. A longer hash may not appear in
    the path at all, otherwise ``file.ts>>>>line10`` would split inside the
    doubled hash.

    Named groups: ``path``, ``hash``, ``start_line``, ``start_char``,
    ``end_line``, ``end_char`` and ``metadata`` (portable suffix).
    """
    hash_ = escape_regex(delimiters.hash)

    if len(delimiters.hash) == 1:
        unquoted = r"\S+?"
    else:
        unquoted = rf"(?:(?!{hash_})\S)+"

    sep = escape_regex(PORTABLE_METADATA_SEPARATOR)
    field = rf"[^{sep}\s]+"
    metadata = rf"(?P<metadata>{sep}{field}{sep}{field}{sep}{field}{sep}(?:{field}{sep})?)?"

    source = (
        f"{NOT_AFTER_URL_CHAR}"
        f"(?P<path>{QUOTED_PATH_SOURCE}|{NO_WEB_URL_SCHEME}{NOT_OPENING_PUNCTUATION}{unquoted})"
        f"{build_range_source(delimiters)}"
        f"{metadata}"
    )
    return re.compile(source)
