"""Parse a command-line selection argument into a SelectionSpan."""

import re

from ..types.Position import Position
from ..types.SelectionSpan import SelectionSpan

_SELECTION_ARG = re.compile(r"(?P<sl>[0-9]+)(?::(?P<sc>[0-9]+))?(?:-(?P<el>[0-9]+)(?::(?P<ec>[0-9]+))?)?")


def parse_selection_arg(value: str) -> SelectionSpan:
    """Parse ``LINE[:CHAR][-LINE[:CHAR]]`` (1-indexed).

    ``10`` is the whole of line 10, ``10:5-12:8`` runs from line 10 character
    5 to line 12 character 8. Without an end, the span ends where it starts.

    Raises:
        ValueError: If ``value`` does not follow the syntax
    """
    match = _SELECTION_ARG.fullmatch(value.strip())
    if match is None:
        raise ValueError(f"Invalid selection {value!r}, expected LINE[:CHAR][-LINE[:CHAR]]")

    start_line = int(match["sl"])
    start_char = int(match["sc"]) if match["sc"] else None
    if match["el"]:
        end = Position(int(match["el"]), int(match["ec"]) if match["ec"] else None)
    else:
        end = Position(start_line, start_char)

    return SelectionSpan(start=Position(start_line, start_char), end=end)
