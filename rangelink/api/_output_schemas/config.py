"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show.

    - section: requested section, empty string when listing all sections
    - content: the section dict, or {"sections": [...]} when listing
    - config_path: path to the configuration file (may not exist)
    """

    section: str = Field(..., description="Section name, empty string if none provided")
    content: dict[str, Any] = Field(..., description="Section content, or the list of section names")
    config_path: str = Field(..., description="Path to the configuration file")


class ConfigValidateOutput(BaseOutputSchema):
    """Output schema for config validate."""

    config_path: str = Field(..., description="Path to the configuration file")
    delimiters: dict[str, str] = Field(..., description="Delimiters in effect after validation")
    sources: dict[str, str] = Field(..., description="Per delimiter: 'user' or 'default'")
    used_defaults: bool = Field(..., description="True when invalid settings forced the default delimiters")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version."""

    version: str = Field(..., description="Package version string")
    git_sha: str = Field(..., description="Git commit SHA (short), empty string if not available")
    full_version: str = Field(..., description="Full version string (version + git_sha if available)")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "validate", ConfigValidateOutput)
register_output_schema("config", "version", ConfigVersionOutput)
