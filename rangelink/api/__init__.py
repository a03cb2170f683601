"""API module for RangeLink.

Functions defined here are the single source of truth for both the library
surface and the CLI commands built on top of it.
"""

__all__ = []
