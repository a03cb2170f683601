from ..delimiter.DelimiterConfig import DelimiterConfig
from .ComputedSelection import ComputedSelection


def build_anchor(computed: ComputedSelection, delimiters: DelimiterConfig) -> str:
    """Render the range after the hash: ``L10``, ``L10-L20`` or ``L10C5-L20C10``.

    Only a line-only selection on a single line collapses to ``L10``.
    """
    line, position, range_ = delimiters.line, delimiters.position, delimiters.range

    if not computed.with_positions:
        if computed.start_line == computed.end_line:
            return f"{line}{computed.start_line}"
        return f"{line}{computed.start_line}{range_}{line}{computed.end_line}"

    start = f"{line}{computed.start_line}{position}{computed.start_char}"
    end = f"{line}{computed.end_line}{position}{computed.end_char}"
    return f"{start}{range_}{end}"
