"""A selection expressed in the 1-indexed link coordinate system."""

from dataclasses import dataclass

from .Position import Position
from .SelectionCoverage import SelectionCoverage


@dataclass(frozen=True)
class SelectionSpan:
    """Ordered start/end pair with coverage derived from its geometry.

    ``end_line_length`` is the length of the end line when the caller knows
    it; a span ending at or beyond it counts as reaching the end of the line.
    """

    start: Position
    end: Position
    end_line_length: int | None = None

    @property
    def coverage(self) -> SelectionCoverage:
        starts_at_line_start = self.start.character in (None, 1)
        if self.end.character is None:
            reaches_line_end = True
        else:
            reaches_line_end = self.end_line_length is not None and self.end.character >= self.end_line_length
        if starts_at_line_start and reaches_line_end:
            return SelectionCoverage.FULL_LINE
        return SelectionCoverage.PARTIAL_LINE

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line
