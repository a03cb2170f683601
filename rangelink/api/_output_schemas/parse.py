"""Output schemas for parse commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ParseParseOutput(BaseOutputSchema):
    """Output schema for parse."""

    text: str = Field(..., description="Input text")
    parsed: dict[str, Any] | None = Field(..., description="Parsed link, null on failure")
    error: dict[str, Any] | None = Field(None, description="Structured error, null on success")


register_output_schema("parse", "parse", ParseParseOutput)
