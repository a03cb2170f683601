"""Top-level RangeLink configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..delimiter.DelimiterConfig import DelimiterConfig
from ..delimiter.DelimiterLoadResult import DelimiterLoadResult
from ..delimiter.load_delimiter_config import load_delimiter_config
from .DelimiterSettings import DelimiterSettings
from .get_config_path import get_config_path
from .LogConfig import LogConfig


class RangeLinkConfig(BaseModel):
    """Configuration file contents.

    Every section is optional; a missing file yields all defaults.
    """

    model_config = ConfigDict(extra="forbid")

    delimiters: DelimiterSettings = Field(default_factory=DelimiterSettings)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> "RangeLinkConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path or get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: top level of {path} must be an object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def resolve_delimiters(self) -> DelimiterLoadResult:
        """Validate the delimiter section, falling back to defaults when invalid."""
        return load_delimiter_config(self.delimiters.model_dump())

    def delimiter_config(self) -> DelimiterConfig:
        return self.resolve_delimiters().delimiters

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "delimiters": self.delimiters.model_dump(exclude_none=True),
            "log": self.log.model_dump(),
        }

    def save(self, path: Path | None = None) -> None:
        """Write the configuration as JSON through a temp file and rename."""
        path = path or get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
