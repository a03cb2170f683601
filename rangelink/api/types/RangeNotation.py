"""How range information is written into a link."""

from enum import Enum


class RangeNotation(str, Enum):
    """Range notation preference.

    - AUTO: line-only (``L10-L20``) when the span covers full lines,
      positions (``L10C5-L20C15``) otherwise.
    - ENFORCE_FULL_LINE: always line-only, discarding characters.
    - ENFORCE_POSITIONS: always include characters.
    """

    AUTO = "Auto"
    ENFORCE_FULL_LINE = "EnforceFullLine"
    ENFORCE_POSITIONS = "EnforcePositions"
