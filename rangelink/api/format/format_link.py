"""Format a RangeLink from selections."""

import logging
from collections.abc import Sequence

from ..delimiter.DelimiterConfig import DelimiterConfig
from ..errors.RangeLinkError import RangeLinkError
from ..quoting.quote_path import quote_path
from ..types.FormatOptions import FormatOptions
from ..types.LinkType import LinkType
from ..types.Result import Result
from ..types.SelectionSpan import SelectionSpan
from .build_anchor import build_anchor
from .compose_portable_metadata import compose_portable_metadata
from .compute_range_spec import compute_range_spec
from .join_with_hash import join_with_hash

logger = logging.getLogger(__name__)


def format_link(
    path: str,
    selections: Sequence[SelectionSpan],
    delimiters: DelimiterConfig,
    options: FormatOptions | None = None,
) -> Result[str, RangeLinkError]:
    """Format ``path`` and ``selections`` as link text.

    Args:
        path: Path to encode, already in the form (relative or absolute) the
            caller wants. Quoted when it holds shell-unsafe characters.
        selections: Non-empty list of 1-indexed selections.
        delimiters: Delimiters to render with; assumed already validated.
        options: Coverage override and link type. ``LinkType.PORTABLE``
            appends the delimiter metadata suffix.

    Returns:
        Result with the link text, or a ``SELECTION_*`` error.
    """
    options = options or FormatOptions()

    computed_result = compute_range_spec(selections, options)
    if not computed_result.success:
        logger.debug("format_link rejected selections: %s", computed_result.error)
        return Result.err(computed_result.error)
    computed = computed_result.value

    anchor = build_anchor(computed, delimiters)
    link = join_with_hash(quote_path(path), anchor, delimiters, computed.selection_kind)

    if options.link_type is LinkType.PORTABLE:
        link += compose_portable_metadata(delimiters, include_position=computed.with_positions)

    logger.debug(
        "Generated %s link %r (kind=%s, positions=%s)",
        options.link_type.value,
        link,
        computed.selection_kind.value,
        computed.with_positions,
    )
    return Result.ok(link)
