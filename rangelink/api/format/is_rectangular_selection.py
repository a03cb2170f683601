from collections.abc import Sequence

from ..types.SelectionSpan import SelectionSpan


def is_rectangular_selection(selections: Sequence[SelectionSpan]) -> bool:
    """Detect a column (block) selection.

    True when there are at least two selections, each on a single line with
    explicit characters, all sharing the same start and end character, on
    contiguous ascending lines in the given order. Independent selections
    that happen to line up this way are indistinguishable and are treated as
    rectangular too.
    """
    if len(selections) < 2:
        return False

    first = selections[0]
    if first.start.character is None or first.end.character is None:
        return False

    previous_line = first.start.line - 1
    for selection in selections:
        if not selection.is_single_line:
            return False
        if selection.start.character != first.start.character or selection.end.character != first.end.character:
            return False
        if selection.start.line != previous_line + 1:
            return False
        previous_line = selection.start.line

    return True
