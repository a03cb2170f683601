"""Value records exchanged by the formatter, parser and scanner."""

from .DetectedLink import DetectedLink
from .FormatOptions import FormatOptions
from .LinkType import LinkType
from .ParsedLink import ParsedLink
from .Position import Position
from .RangeNotation import RangeNotation
from .Result import Result
from .SelectionCoverage import SelectionCoverage
from .SelectionKind import SelectionKind
from .SelectionSpan import SelectionSpan

__all__ = [
    "DetectedLink",
    "FormatOptions",
    "LinkType",
    "ParsedLink",
    "Position",
    "RangeNotation",
    "Result",
    "SelectionCoverage",
    "SelectionKind",
    "SelectionSpan",
]
