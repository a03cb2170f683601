"""Delimiter configuration and validation."""

from .DEFAULT_DELIMITERS import DEFAULT_DELIMITERS
from .DelimiterConfig import DelimiterConfig
from .DelimiterLoadResult import DelimiterLoadResult
from .load_delimiter_config import load_delimiter_config
from .validate_delimiter import validate_delimiter
from .validate_delimiter_config import validate_delimiter_config
from .validate_substring_conflicts import have_substring_conflicts, validate_substring_conflicts
from .validate_uniqueness import are_delimiters_unique, validate_uniqueness

__all__ = [
    "DEFAULT_DELIMITERS",
    "DelimiterConfig",
    "DelimiterLoadResult",
    "are_delimiters_unique",
    "have_substring_conflicts",
    "load_delimiter_config",
    "validate_delimiter",
    "validate_delimiter_config",
    "validate_substring_conflicts",
    "validate_uniqueness",
]
