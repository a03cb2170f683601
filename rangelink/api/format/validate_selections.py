"""Validate formatter input before any link is built."""

from collections.abc import Sequence

from ..errors.RangeLinkError import RangeLinkError
from ..errors.RangeLinkErrorCode import RangeLinkErrorCode
from ..types.Result import Result
from ..types.SelectionSpan import SelectionSpan


def validate_selections(selections: Sequence[SelectionSpan]) -> Result[None, RangeLinkError]:
    """Reject empty input, coordinates below 1 and backward spans."""
    if not selections:
        return Result.err(
            RangeLinkError(
                RangeLinkErrorCode.SELECTION_EMPTY,
                "At least one selection is required",
                function_name="validate_selections",
            )
        )

    for index, selection in enumerate(selections):
        start, end = selection.start, selection.end
        coordinates = {
            "start.line": start.line,
            "end.line": end.line,
            "start.character": start.character,
            "end.character": end.character,
        }
        for name, value in coordinates.items():
            if value is not None and value < 1:
                return Result.err(
                    RangeLinkError(
                        RangeLinkErrorCode.SELECTION_INVALID_COORDINATES,
                        f"Selection {name} must be >= 1, got {value}",
                        function_name="validate_selections",
                        details={"index": index, "field": name, "received": value, "minimum": 1},
                    )
                )

        if end.line < start.line:
            return Result.err(
                RangeLinkError(
                    RangeLinkErrorCode.SELECTION_BACKWARD_LINE,
                    "Selection end line cannot be before its start line",
                    function_name="validate_selections",
                    details={"index": index, "start_line": start.line, "end_line": end.line},
                )
            )

        if (
            start.line == end.line
            and start.character is not None
            and end.character is not None
            and end.character < start.character
        ):
            return Result.err(
                RangeLinkError(
                    RangeLinkErrorCode.SELECTION_BACKWARD_CHARACTER,
                    "Selection end character cannot be before its start character on the same line",
                    function_name="validate_selections",
                    details={"index": index, "start_char": start.character, "end_char": end.character},
                )
            )

    return Result.ok(None)
