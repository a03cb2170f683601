"""Error codes for RangeLink errors.

Values equal their names so a log line is readable without a lookup table.
Keep alphabetical order within each group.
"""

from enum import Enum


class RangeLinkErrorCode(str, Enum):
    """Specific reason a RangeLink operation failed."""

    # Configuration
    CONFIG_DELIMITER_DIGITS = "CONFIG_DELIMITER_DIGITS"
    CONFIG_DELIMITER_EMPTY = "CONFIG_DELIMITER_EMPTY"
    CONFIG_DELIMITER_NOT_UNIQUE = "CONFIG_DELIMITER_NOT_UNIQUE"
    CONFIG_DELIMITER_RESERVED = "CONFIG_DELIMITER_RESERVED"
    CONFIG_DELIMITER_SUBSTRING_CONFLICT = "CONFIG_DELIMITER_SUBSTRING_CONFLICT"
    CONFIG_DELIMITER_WHITESPACE = "CONFIG_DELIMITER_WHITESPACE"
    CONFIG_HASH_NOT_SINGLE_CHAR = "CONFIG_HASH_NOT_SINGLE_CHAR"

    # Parsing
    PARSE_CHAR_BACKWARD_SAME_LINE = "PARSE_CHAR_BACKWARD_SAME_LINE"
    PARSE_CHAR_OUT_OF_BOUNDS = "PARSE_CHAR_OUT_OF_BOUNDS"
    PARSE_DELIMITERS_AMBIGUOUS = "PARSE_DELIMITERS_AMBIGUOUS"
    PARSE_EMPTY_LINK = "PARSE_EMPTY_LINK"
    PARSE_EMPTY_PATH = "PARSE_EMPTY_PATH"
    PARSE_INVALID_RANGE_FORMAT = "PARSE_INVALID_RANGE_FORMAT"
    PARSE_LINE_BACKWARD = "PARSE_LINE_BACKWARD"
    PARSE_LINE_OUT_OF_BOUNDS = "PARSE_LINE_OUT_OF_BOUNDS"
    PARSE_LINK_TOO_LONG = "PARSE_LINK_TOO_LONG"
    PARSE_NO_HASH_SEPARATOR = "PARSE_NO_HASH_SEPARATOR"
    PARSE_PORTABLE_FORMAT_MISMATCH = "PARSE_PORTABLE_FORMAT_MISMATCH"
    PARSE_URL_NOT_SUPPORTED = "PARSE_URL_NOT_SUPPORTED"

    # Result access
    RESULT_ERROR_ACCESS_ON_SUCCESS = "RESULT_ERROR_ACCESS_ON_SUCCESS"
    RESULT_VALUE_ACCESS_ON_ERROR = "RESULT_VALUE_ACCESS_ON_ERROR"

    # Selection (formatting input)
    SELECTION_BACKWARD_CHARACTER = "SELECTION_BACKWARD_CHARACTER"
    SELECTION_BACKWARD_LINE = "SELECTION_BACKWARD_LINE"
    SELECTION_EMPTY = "SELECTION_EMPTY"
    SELECTION_INVALID_COORDINATES = "SELECTION_INVALID_COORDINATES"
