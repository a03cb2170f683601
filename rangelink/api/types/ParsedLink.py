"""Structured result of parsing a RangeLink."""

from dataclasses import dataclass
from typing import Any

from .LinkType import LinkType
from .Position import Position
from .SelectionKind import SelectionKind


@dataclass(frozen=True)
class ParsedLink:
    """Parsed RangeLink.

    ``path`` is always unquoted; ``quoted_path`` is the path as it appeared in
    the source text (equal to ``path`` when it was not quoted). For a link
    without a range, ``end`` equals ``start``.
    """

    path: str
    quoted_path: str
    start: Position
    end: Position
    link_type: LinkType
    selection_type: SelectionKind

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "quoted_path": self.quoted_path,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "link_type": self.link_type.value,
            "selection_type": self.selection_type.value,
        }
