"""Format -> parse -> format through the public package surface."""

import pytest

import rangelink
from rangelink import DEFAULT_DELIMITERS, FormatOptions, Position, SelectionSpan

pytestmark = pytest.mark.codec


@pytest.mark.parametrize(
    ("path", "selection"),
    [
        ("src/auth.ts", SelectionSpan(Position(42), Position(42))),
        ("src/auth.ts", SelectionSpan(Position(42, 10), Position(58, 25))),
        ("My Folder/it's.ts", SelectionSpan(Position(1, 1), Position(2, 3))),
        ("issue#123/日本.md", SelectionSpan(Position(7), Position(9))),
        ("~/a.ts", SelectionSpan(Position(5, 1), Position(5, 8))),
    ],
)
def test_round_trip(path, selection):
    link = rangelink.format_link(path, [selection], DEFAULT_DELIMITERS).value
    parsed = rangelink.parse_link(link).value
    assert parsed.path == path

    again = rangelink.format_link(
        parsed.path,
        [SelectionSpan(parsed.start, parsed.end)],
        DEFAULT_DELIMITERS,
        FormatOptions(is_full_line=parsed.start.character is None),
    ).value
    assert again == link


def test_detected_link_parses_to_formatted_selection():
    link = rangelink.format_link("My Folder/a.ts", [SelectionSpan(Position(3, 2), Position(4, 1))], DEFAULT_DELIMITERS)
    text = f"see {link.value} for details"
    (found,) = rangelink.find_links_in_text(text, DEFAULT_DELIMITERS)
    assert found.parsed.start == Position(3, 2)
    assert text[found.start_index : found.end_index] == link.value


def test_rectangular_round_trip():
    """Column selections collapse to the first and last line sharing their columns."""
    selections = [SelectionSpan(Position(line, 2), Position(line, 6)) for line in (3, 4, 5)]
    link = rangelink.format_link("~/My Folder/a.ts", selections, DEFAULT_DELIMITERS).value
    assert link == "'~/My Folder/a.ts'##L3C2-L5C6"

    parsed = rangelink.parse_link(link).value
    assert parsed.selection_type is rangelink.SelectionKind.RECTANGULAR
    rebuilt = [
        SelectionSpan(Position(line, parsed.start.character), Position(line, parsed.end.character))
        for line in range(parsed.start.line, parsed.end.line + 1)
    ]
    assert rebuilt == selections
    assert rangelink.format_link(parsed.path, rebuilt, DEFAULT_DELIMITERS).value == link
