from collections.abc import Sequence
from dataclasses import replace

from ..delimiter.DelimiterConfig import DelimiterConfig
from ..errors.RangeLinkError import RangeLinkError
from ..types.FormatOptions import FormatOptions
from ..types.LinkType import LinkType
from ..types.Result import Result
from ..types.SelectionSpan import SelectionSpan
from .format_link import format_link


def format_portable_link(
    path: str,
    selections: Sequence[SelectionSpan],
    delimiters: DelimiterConfig,
    options: FormatOptions | None = None,
) -> Result[str, RangeLinkError]:
    """Like ``format_link`` but always embeds the delimiters (``~#~L~-~C~``)."""
    options = replace(options or FormatOptions(), link_type=LinkType.PORTABLE)
    return format_link(path, selections, delimiters, options)
