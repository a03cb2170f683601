from dataclasses import dataclass

from ..types.SelectionKind import SelectionKind


@dataclass(frozen=True)
class ComputedSelection:
    """Numbers to render, already reduced to one start/end pair.

    ``start_char``/``end_char`` are None when the link is line-only.
    """

    start_line: int
    end_line: int
    start_char: int | None
    end_char: int | None
    selection_kind: SelectionKind

    @property
    def with_positions(self) -> bool:
        return self.start_char is not None
