import re

from ...constants import PORTABLE_METADATA_SEPARATOR
from ..pattern.escape_regex import escape_regex

_SEP = escape_regex(PORTABLE_METADATA_SEPARATOR)
_FIELD = rf"([^{_SEP}]+)"
_METADATA = re.compile(rf"{_SEP}{_FIELD}{_SEP}{_FIELD}{_SEP}{_FIELD}{_SEP}(?:{_FIELD}{_SEP})?")
# A link body ends in a digit and embedded delimiters hold none, so the suffix starts after a digit
_SUFFIX_START = re.compile(rf"(?<=[0-9]){_SEP}")


def split_portable_metadata(text: str) -> tuple[str, list[str] | None]:
    """Split ``path#L10~#~L~-~`` into the link body and its delimiter fields.

    Fields come in metadata order: hash, line, range and optionally position.
    Candidate suffixes start right after a digit and are tried from the
    right, so ``~`` in a path (``'~/a.ts'``, ``'v1~x/a.ts'``) never starts
    the metadata. Returns ``(text, None)`` when there is no trailing metadata.
    """
    starts = [match.start() for match in _SUFFIX_START.finditer(text)]
    for start in reversed(starts):
        match = _METADATA.fullmatch(text, start)
        if match is not None:
            fields = [value for value in match.groups() if value is not None]
            return text[:start], fields
    return text, None
