from ..delimiter.DelimiterConfig import DelimiterConfig
from ..types.SelectionKind import SelectionKind


def join_with_hash(
    path: str,
    anchor: str,
    delimiters: DelimiterConfig,
    selection_kind: SelectionKind = SelectionKind.NORMAL,
) -> str:
    """Join path and anchor with one hash, or two for a rectangular selection."""
    prefix = delimiters.hash * 2 if selection_kind is SelectionKind.RECTANGULAR else delimiters.hash
    return f"{path}{prefix}{anchor}"
