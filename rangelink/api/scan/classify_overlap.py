from collections.abc import Sequence
from typing import Literal

OverlapKind = Literal["none", "partial", "encompassing"]


def classify_overlap(start: int, end: int, ranges: Sequence[tuple[int, int]]) -> OverlapKind:
    """Classify the half-open range ``[start, end)`` against ``ranges``.

    ``"encompassing"`` means the range fully wraps every range it touches.
    Any partial overlap wins over full encompassing, even when other ranges
    are fully wrapped.
    """
    encompassing = False

    for range_start, range_end in ranges:
        if start < range_end and end > range_start:
            if start <= range_start and end >= range_end:
                encompassing = True
            else:
                return "partial"

    return "encompassing" if encompassing else "none"
