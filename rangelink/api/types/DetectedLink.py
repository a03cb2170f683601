"""A link candidate found in free text by the scanner."""

from dataclasses import dataclass
from typing import Any

from .ParsedLink import ParsedLink


@dataclass(frozen=True)
class DetectedLink:
    """Detected link.

    ``start_index`` and ``length`` cover the link as it appears in the source,
    quotes included. ``link_text`` is the link itself: for a link found inside
    a quoted segment the surrounding quotes are stripped. ``parsed`` is
    ``None`` only for candidates that failed to parse and were requested anyway.
    """

    link_text: str
    start_index: int
    length: int
    parsed: ParsedLink | None = None

    @property
    def end_index(self) -> int:
        return self.start_index + self.length

    def to_dict(self) -> dict[str, Any]:
        return {
            "link_text": self.link_text,
            "start_index": self.start_index,
            "length": self.length,
            "parsed": self.parsed.to_dict() if self.parsed is not None else None,
        }
