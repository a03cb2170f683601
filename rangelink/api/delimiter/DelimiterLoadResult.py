from dataclasses import dataclass, field
from typing import Literal

from ..errors.RangeLinkError import RangeLinkError
from .DelimiterConfig import DelimiterConfig

DelimiterSource = Literal["user", "default"]


@dataclass(frozen=True)
class DelimiterLoadResult:
    """Delimiters to use, where each came from, and why defaults were chosen."""

    delimiters: DelimiterConfig
    sources: dict[str, DelimiterSource]
    errors: list[RangeLinkError] = field(default_factory=list)

    @property
    def used_defaults(self) -> bool:
        return bool(self.errors)
