"""Delimiter section of the configuration file."""

from pydantic import BaseModel, ConfigDict, Field


class DelimiterSettings(BaseModel):
    """Raw user delimiter values.

    Values are kept as typed by the user; ``load_delimiter_config`` decides
    whether they are usable. Unset fields take the built-in default.
    """

    model_config = ConfigDict(extra="forbid")

    line: str | None = Field(None, description="Line delimiter (default 'L')")
    position: str | None = Field(None, description="Position delimiter (default 'C')")
    hash: str | None = Field(None, description="Hash delimiter, one character (default '#')")
    range: str | None = Field(None, description="Range delimiter (default '-')")
