from ...constants import PORTABLE_METADATA_SEPARATOR
from ..delimiter.DelimiterConfig import DelimiterConfig


def compose_portable_metadata(delimiters: DelimiterConfig, include_position: bool) -> str:
    """Encode the delimiters as ``~hash~line~range~`` plus ``position~`` when needed."""
    parts = [delimiters.hash, delimiters.line, delimiters.range]
    if include_position:
        parts.append(delimiters.position)
    sep = PORTABLE_METADATA_SEPARATOR
    return f"{sep}{sep.join(parts)}{sep}"
