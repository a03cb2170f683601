"""Load delimiters from raw configuration input with fallback to defaults."""

import logging
from collections.abc import Mapping
from typing import Any

from .DEFAULT_DELIMITERS import DEFAULT_DELIMITERS
from .DelimiterConfig import DelimiterConfig
from .DelimiterLoadResult import DelimiterLoadResult, DelimiterSource
from .validate_delimiter_config import validate_delimiter_config

logger = logging.getLogger(__name__)

_FIELDS = ("line", "position", "hash", "range")


def load_delimiter_config(raw: Mapping[str, Any] | None) -> DelimiterLoadResult:
    """Build a validated DelimiterConfig from user settings.

    Fields missing from ``raw`` (or set to None) take the default value. When
    any field or relationship is invalid the whole default set is used, every
    error is logged, and the errors are returned so the caller can report
    exactly which setting is wrong.
    """
    raw = raw or {}
    values: dict[str, str] = {}
    sources: dict[str, DelimiterSource] = {}

    for name in _FIELDS:
        user_value = raw.get(name)
        if user_value is None:
            values[name] = getattr(DEFAULT_DELIMITERS, name)
            sources[name] = "default"
        else:
            values[name] = str(user_value)
            sources[name] = "user"

    candidate = DelimiterConfig(**values)
    errors = validate_delimiter_config(candidate)

    if errors:
        for error in errors:
            logger.warning("Invalid delimiter configuration: %s (%s)", error, error.details)
        logger.info("Using default delimiters due to %d validation error(s)", len(errors))
        return DelimiterLoadResult(
            delimiters=DEFAULT_DELIMITERS,
            sources=dict.fromkeys(_FIELDS, "default"),
            errors=errors,
        )

    logger.debug("Loaded delimiters %s (sources: %s)", candidate.model_dump(), sources)
    return DelimiterLoadResult(delimiters=candidate, sources=sources, errors=[])
