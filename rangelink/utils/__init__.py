"""RangeLink utilities: logging setup and display abstractions."""

from .logger import configure_logging

__all__ = ["configure_logging"]
