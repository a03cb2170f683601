"""Output schemas for scan commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ScanScanOutput(BaseOutputSchema):
    """Output schema for scan."""

    source: str = Field(..., description="File scanned, or '-' for stdin")
    links: list[dict[str, Any]] = Field(..., description="Detected links in text order")
    count: int = Field(..., description="Number of detected links")
    unparsed_count: int = Field(..., description="Candidates that failed to parse (only counted with --include-unparsed)")


register_output_schema("scan", "scan", ScanScanOutput)
