"""Unit tests for parsing portable links (embedded delimiter metadata)."""

import pytest

from rangelink.api.delimiter import DEFAULT_DELIMITERS, DelimiterConfig
from rangelink.api.errors.RangeLinkErrorCode import RangeLinkErrorCode
from rangelink.api.format import format_portable_link
from rangelink.api.parse import parse_link, split_portable_metadata
from rangelink.api.types import LinkType, Position, SelectionSpan
from tests.unit.conftest import custom_delimiters

pytestmark = pytest.mark.codec


class TestSplitPortableMetadata:
    def test_four_fields(self):
        assert split_portable_metadata("a.ts#L1C1-L2C2~#~L~-~C~") == ("a.ts#L1C1-L2C2", ["#", "L", "-", "C"])

    def test_three_fields(self):
        assert split_portable_metadata("a.ts#L1-L2~#~L~-~") == ("a.ts#L1-L2", ["#", "L", "-"])

    def test_no_metadata(self):
        assert split_portable_metadata("~/a.ts#L1") == ("~/a.ts#L1", None)


def test_portable_with_positions():
    link = parse_link("src/a.ts#L5C10-L10C20~#~L~-~C~").value
    assert link.link_type is LinkType.PORTABLE
    assert (link.start, link.end) == (Position(5, 10), Position(10, 20))


def test_embedded_delimiters_override_local_config():
    link = parse_link("a.ts!line1pos2>>line3pos4~!~line~>>~pos~", DEFAULT_DELIMITERS).value
    assert link.path == "a.ts"
    assert (link.start, link.end) == (Position(1, 2), Position(3, 4))


def test_line_only_borrows_local_position():
    link = parse_link("src/a.ts#L10-L20~#~L~-~", custom_delimiters()).value
    assert link.link_type is LinkType.PORTABLE
    assert (link.start, link.end) == (Position(10), Position(20))


def test_line_only_borrows_default_when_local_position_conflicts():
    local = DelimiterConfig(line="X", position="L", hash="!", range="+")
    link = parse_link("a.ts#L1-L2~#~L~-~", local).value
    assert link.end == Position(2)


@pytest.mark.parametrize("text", ["a.ts#L1~#~#~-~", "a.ts#L1~##~L~-~", "a.ts#L1~#~L1~-~", "a.ts#L1~#~L~-~L~"])
def test_invalid_metadata_is_ambiguous(text):
    result = parse_link(text)
    assert result.error.code is RangeLinkErrorCode.PARSE_DELIMITERS_AMBIGUOUS
    assert result.error.details["errors"]


def test_body_not_using_declared_delimiters():
    result = parse_link("a.ts#L1~!~L~-~")
    assert result.error.code is RangeLinkErrorCode.PARSE_PORTABLE_FORMAT_MISMATCH
    assert result.error.cause.code is RangeLinkErrorCode.PARSE_NO_HASH_SEPARATOR


def test_line_only_metadata_with_positions():
    result = parse_link("a.ts#L1C2-L3C4~#~L~-~")
    assert result.error.code is RangeLinkErrorCode.PARSE_PORTABLE_FORMAT_MISMATCH


def test_quoted_portable_link():
    link = parse_link("'My Folder/a.ts'#L3~#~L~-~").value
    assert link.path == "My Folder/a.ts"
    assert link.link_type is LinkType.PORTABLE


@pytest.mark.parametrize(
    "selection",
    [
        SelectionSpan(Position(3), Position(9)),
        SelectionSpan(Position(3, 4), Position(9, 1)),
        SelectionSpan(Position(7), Position(7)),
    ],
)
def test_round_trip_across_configurations(selection):
    """A portable link made with one config parses under another."""
    link = format_portable_link("src/a.ts", [selection], custom_delimiters()).value
    parsed = parse_link(link, DEFAULT_DELIMITERS).value
    assert parsed.path == "src/a.ts"
    assert parsed.start == selection.start
    assert parsed.end == selection.end


class TestSeparatorInPath:
    @pytest.mark.parametrize(
        ("text", "body"),
        [
            ("'~/src/a.ts'#L10-L20~#~L~-~", "'~/src/a.ts'#L10-L20"),
            ("'backup~1/a.ts'#L10-L20~#~L~-~", "'backup~1/a.ts'#L10-L20"),
            ("'v1~x/a.ts'#L1-L2~#~L~-~", "'v1~x/a.ts'#L1-L2"),
            ("'~/a.ts'#L1C2-L3C4~#~L~-~C~", "'~/a.ts'#L1C2-L3C4"),
        ],
    )
    def test_metadata_starts_after_the_range(self, text, body):
        split_body, fields = split_portable_metadata(text)
        assert split_body == body
        assert fields[:3] == ["#", "L", "-"]

    def test_tilde_path_without_metadata(self):
        assert split_portable_metadata("'~/a.ts'#L1") == ("'~/a.ts'#L1", None)


@pytest.mark.parametrize("path", ["src/a.ts", "~/a.ts", "backup~1/a.ts", "My Folder/it's.ts", "issue#1/日本.md"])
@pytest.mark.parametrize(
    "selection",
    [
        SelectionSpan(Position(10), Position(20)),
        SelectionSpan(Position(4), Position(4)),
        SelectionSpan(Position(3, 4), Position(9, 1)),
    ],
)
def test_portable_round_trip_with_quoted_paths(path, selection):
    link = format_portable_link(path, [selection], DEFAULT_DELIMITERS).value
    parsed = parse_link(link).value
    assert parsed.path == path
    assert parsed.link_type is LinkType.PORTABLE
    assert (parsed.start, parsed.end) == (selection.start, selection.end)
