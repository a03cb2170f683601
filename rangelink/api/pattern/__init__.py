"""Regex construction for link detection and parsing."""

from .build_link_pattern import build_link_pattern
from .build_range_source import build_range_source
from .escape_regex import escape_regex

__all__ = ["build_link_pattern", "build_range_source", "escape_regex"]
