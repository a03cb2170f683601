"""Validate a single delimiter value."""

import re

from ...constants import RESERVED_CHARS
from ..errors.RangeLinkError import RangeLinkError
from ..errors.RangeLinkErrorCode import RangeLinkErrorCode
from ..types.Result import Result

_DIGIT = re.compile(r"\d")
_WHITESPACE = re.compile(r"\s")


def validate_delimiter(value: str, is_hash: bool = False) -> Result[str, RangeLinkError]:
    """Validate one delimiter value.

    The hash slot must be exactly one character because it is doubled to
    signal rectangular selections.

    Returns:
        Result with the value on success, the first failing rule otherwise.
    """

    def _err(code: RangeLinkErrorCode, message: str, **details) -> Result[str, RangeLinkError]:
        return Result.err(
            RangeLinkError(
                code,
                message,
                function_name="validate_delimiter",
                details={"value": value, "is_hash": is_hash, **details},
            )
        )

    if not value or value.strip() == "":
        return _err(RangeLinkErrorCode.CONFIG_DELIMITER_EMPTY, "Delimiter must not be empty")

    if is_hash and len(value) != 1:
        return _err(
            RangeLinkErrorCode.CONFIG_HASH_NOT_SINGLE_CHAR,
            "Hash delimiter must be exactly one character",
            actual_length=len(value),
        )

    if _DIGIT.search(value):
        return _err(RangeLinkErrorCode.CONFIG_DELIMITER_DIGITS, "Delimiter cannot contain digits")

    if _WHITESPACE.search(value):
        return _err(RangeLinkErrorCode.CONFIG_DELIMITER_WHITESPACE, "Delimiter cannot contain whitespace")

    for ch in RESERVED_CHARS:
        if ch in value:
            return _err(
                RangeLinkErrorCode.CONFIG_DELIMITER_RESERVED,
                f"Delimiter cannot contain reserved character '{ch}'",
                reserved_char=ch,
            )

    return Result.ok(value)
