"""RangeLink - compact, human-typable references to line and column ranges in files.

The public surface re-exports the codec (format/parse), the detector (scan)
and the value types they exchange.
"""

from .api.delimiter.DEFAULT_DELIMITERS import DEFAULT_DELIMITERS
from .api.delimiter.DelimiterConfig import DelimiterConfig
from .api.errors.RangeLinkError import RangeLinkError
from .api.errors.RangeLinkErrorCode import RangeLinkErrorCode
from .api.format.format_link import format_link
from .api.format.format_portable_link import format_portable_link
from .api.parse.parse_link import parse_link
from .api.scan.CancellationToken import CancellationToken
from .api.scan.find_links_in_text import find_links_in_text
from .api.types.DetectedLink import DetectedLink
from .api.types.FormatOptions import FormatOptions
from .api.types.LinkType import LinkType
from .api.types.ParsedLink import ParsedLink
from .api.types.Position import Position
from .api.types.Result import Result
from .api.types.SelectionKind import SelectionKind
from .api.types.SelectionSpan import SelectionSpan

__all__ = [
    "DEFAULT_DELIMITERS",
    "CancellationToken",
    "DelimiterConfig",
    "DetectedLink",
    "FormatOptions",
    "LinkType",
    "ParsedLink",
    "Position",
    "RangeLinkError",
    "RangeLinkErrorCode",
    "Result",
    "SelectionKind",
    "SelectionSpan",
    "find_links_in_text",
    "format_link",
    "format_portable_link",
    "parse_link",
]
