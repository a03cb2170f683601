"""Check that all delimiters differ (case-insensitive)."""

from ..errors.RangeLinkError import RangeLinkError
from ..errors.RangeLinkErrorCode import RangeLinkErrorCode
from ..types.Result import Result
from .DelimiterConfig import DelimiterConfig


def validate_uniqueness(delimiters: DelimiterConfig) -> Result[None, RangeLinkError]:
    """Validate that no two delimiters are equal, ignoring case ("L" and "l" collide)."""
    lowered = [value.lower() for value in delimiters.values()]
    if len(set(lowered)) != len(lowered):
        return Result.err(
            RangeLinkError(
                RangeLinkErrorCode.CONFIG_DELIMITER_NOT_UNIQUE,
                "Delimiters must be unique (case-insensitive)",
                function_name="validate_uniqueness",
                details={"delimiters": delimiters.model_dump()},
            )
        )
    return Result.ok(None)


def are_delimiters_unique(delimiters: DelimiterConfig) -> bool:
    """Return True when all four delimiters are distinct (case-insensitive)."""
    return validate_uniqueness(delimiters).success
