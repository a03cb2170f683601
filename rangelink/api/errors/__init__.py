"""Error types shared by every RangeLink domain."""

from .RangeLinkError import RangeLinkError
from .RangeLinkErrorCode import RangeLinkErrorCode

__all__ = ["RangeLinkError", "RangeLinkErrorCode"]
