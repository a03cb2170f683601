"""Unit tests for rangelink.api.format.is_rectangular_selection."""

import pytest

from rangelink.api.format import is_rectangular_selection
from rangelink.api.types import Position, SelectionSpan

pytestmark = pytest.mark.codec


def line_span(line, start_char, end_char):
    return SelectionSpan(Position(line, start_char), Position(line, end_char))


def test_single_selection_is_not_rectangular():
    assert not is_rectangular_selection([line_span(1, 1, 5)])


def test_aligned_contiguous_lines():
    assert is_rectangular_selection([line_span(4, 2, 6), line_span(5, 2, 6)])


def test_different_columns():
    assert not is_rectangular_selection([line_span(4, 2, 6), line_span(5, 2, 7)])


def test_multi_line_member():
    multi = SelectionSpan(Position(5, 2), Position(6, 6))
    assert not is_rectangular_selection([line_span(4, 2, 6), multi])


def test_characters_must_be_defined():
    whole_lines = [SelectionSpan(Position(1), Position(1)), SelectionSpan(Position(2), Position(2))]
    assert not is_rectangular_selection(whole_lines)


def test_coincidentally_aligned_selections_count_as_rectangular():
    """Independent cursors on adjacent lines with equal columns look like a block."""
    assert is_rectangular_selection([line_span(7, 3, 3), line_span(8, 3, 3)])
