"""Unit tests for rangelink.api.pattern.escape_regex."""

import re

import pytest

from rangelink.api.pattern import escape_regex

pytestmark = pytest.mark.codec


def test_escapes_every_metacharacter():
    assert escape_regex(".*+?^${}()|[]\\") == "\\.\\*\\+\\?\\^\\$\\{\\}\\(\\)\\|\\[\\]\\\\"


@pytest.mark.parametrize("literal", ["#", "@", "-", ":", "L", "line", ">>", "~"])
def test_leaves_other_characters(literal):
    assert escape_regex(literal) == literal


def test_escaping_twice_double_escapes():
    assert escape_regex(escape_regex(".")) == "\\\\\\."


@pytest.mark.parametrize("literal", ["(.*)", "[a]", "a+b", "$^", "{1,2}", "a|b", "\\d"])
def test_escaped_literal_matches_only_itself(literal):
    pattern = re.compile(escape_regex(literal))
    assert pattern.fullmatch(literal)
    assert pattern.search("x" * 5) is None
