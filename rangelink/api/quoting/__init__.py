"""POSIX single-quote handling for paths with shell-unsafe characters."""

from .needs_quoting import needs_quoting
from .quote_link import quote_link
from .quote_path import quote_path
from .unquote_path import unquote_path

__all__ = ["needs_quoting", "quote_link", "quote_path", "unquote_path"]
