"""Unit tests for rangelink.api.pattern.build_link_pattern."""

import pytest

from rangelink.api.delimiter import DEFAULT_DELIMITERS, DelimiterConfig
from rangelink.api.pattern import build_link_pattern
from tests.unit.conftest import custom_delimiters

pytestmark = pytest.mark.codec


def _matches(text, delimiters=DEFAULT_DELIMITERS):
    return [m.group(0) for m in build_link_pattern(delimiters).finditer(text)]


def test_named_groups():
    match = build_link_pattern(DEFAULT_DELIMITERS).search("src/a.ts#L5C10-L10C20")
    assert match["path"] == "src/a.ts"
    assert match["hash"] == "#"
    assert (match["start_line"], match["start_char"]) == ("5", "10")
    assert (match["end_line"], match["end_char"]) == ("10", "20")
    assert match["metadata"] is None


def test_finds_each_link_separately():
    assert _matches("file1.ts#L10 file2.ts#L20") == ["file1.ts#L10", "file2.ts#L20"]


def test_hash_in_filename():
    match = build_link_pattern(DEFAULT_DELIMITERS).search("file#1.ts#L10")
    assert match["path"] == "file#1.ts"


def test_double_hash_captured():
    match = build_link_pattern(DEFAULT_DELIMITERS).search("a.ts##L10C5-L12C10")
    assert match["hash"] == "##"


def test_quoted_path_alternative():
    match = build_link_pattern(DEFAULT_DELIMITERS).search("open 'My Folder/a.ts'#L10 now")
    assert match.group(0) == "'My Folder/a.ts'#L10"
    assert match["path"] == "'My Folder/a.ts'"


def test_portable_suffix_captured():
    match = build_link_pattern(DEFAULT_DELIMITERS).search("a.ts#L1-L2~#~L~-~ rest")
    assert match["metadata"] == "~#~L~-~"


@pytest.mark.parametrize(
    "text",
    [
        "https://github.com/org/repo/blob/main/a.ts#L10",
        "http://example.com/a.ts#L10",
        "FTP://host/a.ts#L10",
    ],
)
def test_web_urls_not_matched(text):
    assert _matches(text) == []


def test_file_url_and_windows_paths_allowed():
    assert _matches("C:/work/a.ts#L3") == ["C:/work/a.ts#L3"]


def test_non_ascii_digits_not_matched():
    assert _matches("a.ts#L١٠") == []


def test_opening_punctuation_not_in_path():
    assert _matches("(src/a.ts#L10)") == ["src/a.ts#L10"]
    assert _matches("[src/a.ts#L10]") == ["src/a.ts#L10"]


def test_custom_delimiters():
    assert _matches("x.ts!line3 y.ts!line4pos2>>line5pos1", custom_delimiters()) == [
        "x.ts!line3",
        "y.ts!line4pos2>>line5pos1",
    ]


def test_multi_char_hash_not_allowed_in_path():
    delimiters = DelimiterConfig(line="L", position="C", hash=">>", range="-")
    match = build_link_pattern(delimiters).search("file.ts>>>>L10")
    assert match["path"] == "file.ts"
    assert match["hash"] == ">>>>"


def test_metacharacter_delimiters_are_literal():
    delimiters = DelimiterConfig(line="L", position="C", hash="$", range="+")
    assert _matches("a.ts$L1+L2 b.tsXL1", delimiters) == ["a.ts$L1+L2"]
