"""Link parsing: notation text in, ParsedLink out."""

from .parse_link import parse_link
from .resolve_portable_delimiters import resolve_portable_delimiters
from .split_portable_metadata import split_portable_metadata

__all__ = ["parse_link", "resolve_portable_delimiters", "split_portable_metadata"]
