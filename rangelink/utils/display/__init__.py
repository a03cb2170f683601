"""Display abstractions shared by the CLI."""

from .context import DisplayContext, display_context
from .Display import Display

__all__ = ["Display", "DisplayContext", "display_context"]
