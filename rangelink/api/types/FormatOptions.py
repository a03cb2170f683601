from dataclasses import dataclass

from .LinkType import LinkType
from .RangeNotation import RangeNotation


@dataclass(frozen=True)
class FormatOptions:
    """Formatting options.

    ``is_full_line`` overrides the computed coverage: ``True`` forces
    line-only notation, ``False`` forces positions, ``None`` decides from
    the selection geometry.
    """

    is_full_line: bool | None = None
    link_type: LinkType = LinkType.REGULAR

    @property
    def notation(self) -> RangeNotation:
        if self.is_full_line is None:
            return RangeNotation.AUTO
        return RangeNotation.ENFORCE_FULL_LINE if self.is_full_line else RangeNotation.ENFORCE_POSITIONS
