from enum import Enum


class SelectionCoverage(str, Enum):
    """Whether a span covers whole lines or specific characters."""

    FULL_LINE = "FullLine"
    PARTIAL_LINE = "PartialLine"
