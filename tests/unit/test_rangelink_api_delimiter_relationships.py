"""Unit tests for delimiter uniqueness and substring checks."""

import pytest

from rangelink.api.delimiter import (
    DEFAULT_DELIMITERS,
    DelimiterConfig,
    are_delimiters_unique,
    have_substring_conflicts,
    validate_delimiter_config,
    validate_substring_conflicts,
    validate_uniqueness,
)
from rangelink.api.errors.RangeLinkErrorCode import RangeLinkErrorCode
from tests.unit.conftest import custom_delimiters

pytestmark = pytest.mark.config


def test_defaults_are_valid():
    assert are_delimiters_unique(DEFAULT_DELIMITERS)
    assert not have_substring_conflicts(DEFAULT_DELIMITERS)
    assert validate_delimiter_config(DEFAULT_DELIMITERS) == []


def test_custom_multi_char_set_is_valid():
    assert validate_delimiter_config(custom_delimiters()) == []


def test_case_insensitive_duplicates_rejected():
    """'L' and 'l' collide."""
    config = DelimiterConfig(line="L", position="l", hash="#", range="-")
    assert not are_delimiters_unique(config)
    result = validate_uniqueness(config)
    assert result.error.code is RangeLinkErrorCode.CONFIG_DELIMITER_NOT_UNIQUE


def test_equal_delimiters_are_also_substring_conflicts():
    """Together both checks reject every config with equal symbols."""
    config = DelimiterConfig(line="L", position="L", hash="#", range="-")
    assert not are_delimiters_unique(config)
    assert have_substring_conflicts(config)


def test_substring_conflict_detected():
    config = DelimiterConfig(line="L", position="LC", hash="#", range="-")
    assert are_delimiters_unique(config)
    assert have_substring_conflicts(config)
    result = validate_substring_conflicts(config)
    assert result.error.code is RangeLinkErrorCode.CONFIG_DELIMITER_SUBSTRING_CONFLICT
    assert result.error.details["container"] == "position"
    assert result.error.details["contained"] == "line"


def test_substring_conflict_ignores_case():
    config = DelimiterConfig(line="line", position="LIN", hash="#", range="-")
    assert have_substring_conflicts(config)


class TestValidateDelimiterConfig:
    def test_accumulates_one_error_per_field(self):
        config = DelimiterConfig(line="", position="C1", hash="##", range="-")
        errors = validate_delimiter_config(config)
        assert [e.details["field"] for e in errors] == ["line", "position", "hash"]
        assert [e.code for e in errors] == [
            RangeLinkErrorCode.CONFIG_DELIMITER_EMPTY,
            RangeLinkErrorCode.CONFIG_DELIMITER_DIGITS,
            RangeLinkErrorCode.CONFIG_HASH_NOT_SINGLE_CHAR,
        ]

    def test_relationships_only_checked_when_fields_valid(self):
        config = DelimiterConfig(line="L", position="L", hash="##", range="-")
        errors = validate_delimiter_config(config)
        assert [e.code for e in errors] == [RangeLinkErrorCode.CONFIG_HASH_NOT_SINGLE_CHAR]

    def test_relationship_errors(self):
        config = DelimiterConfig(line="L", position="l", hash="#", range="-")
        codes = [e.code for e in validate_delimiter_config(config)]
        assert codes == [
            RangeLinkErrorCode.CONFIG_DELIMITER_NOT_UNIQUE,
            RangeLinkErrorCode.CONFIG_DELIMITER_SUBSTRING_CONFLICT,
        ]


def test_delimiter_config_is_frozen():
    with pytest.raises(Exception):
        DEFAULT_DELIMITERS.line = "X"


def test_delimiter_config_rejects_unknown_fields():
    with pytest.raises(Exception):
        DelimiterConfig(line="L", position="C", hash="#", range="-", extra="x")
