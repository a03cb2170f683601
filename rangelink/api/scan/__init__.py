"""Link detection in free text."""

from .CancellationToken import CancellationToken
from .classify_overlap import OverlapKind, classify_overlap
from .find_links_in_text import find_links_in_text

__all__ = ["CancellationToken", "OverlapKind", "classify_overlap", "find_links_in_text"]
