"""Delimiter configuration model."""

from pydantic import BaseModel, ConfigDict, Field


class DelimiterConfig(BaseModel):
    """The four symbols composing the notation, e.g. ``path#L10C5-L20C10``.

    The model is frozen but does not validate the symbols itself; use
    ``validate_delimiter_config`` or ``load_delimiter_config`` for that so each
    offending field is reported with its own error.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    line: str = Field(..., description="Prefix of a line number (L10)")
    position: str = Field(..., description="Prefix of a character position (C5)")
    hash: str = Field(..., description="Separates the path from the range (path#L10)")
    range: str = Field(..., description="Separates range start from range end (L10-L20)")

    def values(self) -> tuple[str, str, str, str]:
        """Delimiter values in a fixed order: line, position, hash, range."""
        return (self.line, self.position, self.hash, self.range)
