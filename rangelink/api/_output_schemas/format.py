"""Output schemas for format commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class FormatFormatOutput(BaseOutputSchema):
    """Output schema for format.

    ``link`` is empty when formatting failed; ``error`` then holds the
    structured RangeLinkError.
    """

    path: str = Field(..., description="Path as given on the command line")
    link: str = Field(..., description="Formatted link, empty string on failure")
    link_type: str = Field(..., description="Regular or Portable")
    delimiters: dict[str, str] = Field(..., description="Delimiters used for formatting")
    error: dict[str, Any] | None = Field(None, description="Structured error, null on success")


register_output_schema("format", "format", FormatFormatOutput)
