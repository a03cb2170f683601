"""Check that no delimiter is a substring of another (case-insensitive)."""

from ..errors.RangeLinkError import RangeLinkError
from ..errors.RangeLinkErrorCode import RangeLinkErrorCode
from ..types.Result import Result
from .DelimiterConfig import DelimiterConfig

_FIELDS = ("line", "position", "hash", "range")


def validate_substring_conflicts(delimiters: DelimiterConfig) -> Result[None, RangeLinkError]:
    """Validate that no delimiter contains another one.

    Equal delimiters count as a conflict too, so this check alone rejects
    every config ``validate_uniqueness`` rejects.
    """
    values = [value.lower() for value in delimiters.values()]

    for i, outer in enumerate(values):
        for j, inner in enumerate(values):
            if i == j or not outer or not inner:
                continue
            if inner in outer:
                return Result.err(
                    RangeLinkError(
                        RangeLinkErrorCode.CONFIG_DELIMITER_SUBSTRING_CONFLICT,
                        "Delimiters cannot be substrings of each other",
                        function_name="validate_substring_conflicts",
                        details={
                            "delimiters": delimiters.model_dump(),
                            "container": _FIELDS[i],
                            "contained": _FIELDS[j],
                        },
                    )
                )

    return Result.ok(None)


def have_substring_conflicts(delimiters: DelimiterConfig) -> bool:
    """Return True when any delimiter contains another (case-insensitive)."""
    return not validate_substring_conflicts(delimiters).success
