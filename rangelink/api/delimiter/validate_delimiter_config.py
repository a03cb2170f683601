"""Validate a full delimiter configuration, accumulating every error."""

from ..errors.RangeLinkError import RangeLinkError
from .DelimiterConfig import DelimiterConfig
from .validate_delimiter import validate_delimiter
from .validate_substring_conflicts import validate_substring_conflicts
from .validate_uniqueness import validate_uniqueness


def validate_delimiter_config(delimiters: DelimiterConfig) -> list[RangeLinkError]:
    """Validate each field, then the relationships between fields.

    Relationships are only checked when every field is valid on its own, so
    a single bad value is not reported twice.

    Returns:
        One error per offending field (``details["field"]`` names it), or the
        relationship errors; an empty list when the config is usable.
    """
    errors: list[RangeLinkError] = []

    for field_name in ("line", "position", "hash", "range"):
        result = validate_delimiter(getattr(delimiters, field_name), is_hash=field_name == "hash")
        if not result.success:
            error = result.error
            error.details["field"] = field_name
            errors.append(error)

    if errors:
        return errors

    for check in (validate_uniqueness, validate_substring_conflicts):
        result = check(delimiters)
        if not result.success:
            errors.append(result.error)

    return errors
