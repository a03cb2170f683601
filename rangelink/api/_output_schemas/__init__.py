"""Output schemas for CLI-facing commands, registered per (domain, command)."""

from . import config, format, parse, scan  # noqa: F401  (register on import)
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "register_output_schema"]
