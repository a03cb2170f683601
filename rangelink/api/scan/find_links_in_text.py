"""Find RangeLinks in free text."""

import logging
import re
from collections.abc import Iterator

from ..delimiter.DelimiterConfig import DelimiterConfig
from ..parse.parse_link import parse_link
from ..pattern.build_link_pattern import build_link_pattern
from ..quoting.unquote_path import unquote_path
from ..types.DetectedLink import DetectedLink
from .CancellationToken import CancellationToken
from .classify_overlap import classify_overlap

logger = logging.getLogger(__name__)

# Links wrapped by quote_link, and double-quoted links pasted into prose
QUOTED_SEGMENT = re.compile(r"'(?P<single>(?:'\\''|[^'\n])+)'|\"(?P<double>[^\"\n]+)\"")


def find_links_in_text(
    text: str,
    delimiters: DelimiterConfig,
    token: CancellationToken | None = None,
    include_unparsed: bool = False,
) -> Iterator[DetectedLink]:
    """Yield the links found in ``text``, in text order.

    Candidates come from two sources: matches of ``build_link_pattern`` and
    quoted segments (``'...'`` or ``"..."``) whose content parses as a link,
    which is how links with spaces in their path are found. When both start
    at the same index the quoted segment is tried first; a candidate
    overlapping an accepted link is dropped.

    Every call is an independent lazy scan.

    Args:
        text: Text to scan
        delimiters: Delimiters for both the pattern and the parser
        token: Checked before each candidate; once cancelled, the scan stops
        include_unparsed: Also yield pattern matches that fail to parse,
            with ``parsed=None``

    Yields:
        DetectedLink whose ``start_index``/``length`` cover the link as it
        appears in ``text``, quotes included.
    """
    pattern = build_link_pattern(delimiters)
    matches = pattern.finditer(text)
    segments = QUOTED_SEGMENT.finditer(text)

    next_match = next(matches, None)
    next_segment = next(segments, None)
    last_accepted: tuple[int, int] | None = None
    accepted = failures = 0

    while next_match is not None or next_segment is not None:
        if token is not None and token.is_cancellation_requested:
            logger.debug("Link scan cancelled after %d link(s)", accepted)
            return

        take_segment = next_match is None or (
            next_segment is not None and next_segment.start() <= next_match.start()
        )
        candidate = next_segment if take_segment else next_match
        if take_segment:
            next_segment = next(segments, None)
        else:
            next_match = next(matches, None)

        start, end = candidate.span()
        if last_accepted is not None and classify_overlap(start, end, [last_accepted]) != "none":
            continue

        if take_segment:
            if candidate["single"] is not None:
                link_text = unquote_path(candidate.group(0))
                result = parse_link(candidate.group(0), delimiters)
            else:
                link_text = candidate["double"]
                result = parse_link(link_text, delimiters)
            if not result.success:
                continue
        else:
            link_text = candidate.group(0)
            result = parse_link(link_text, delimiters)
            if not result.success:
                failures += 1
                logger.debug("Skipping candidate %r: %s", link_text, result.error)
                if include_unparsed:
                    yield DetectedLink(link_text=link_text, start_index=start, length=end - start, parsed=None)
                continue

        last_accepted = (start, end)
        accepted += 1
        yield DetectedLink(link_text=link_text, start_index=start, length=end - start, parsed=result.value)

    if accepted or failures:
        logger.debug("Link scan complete: %d link(s), %d parse failure(s)", accepted, failures)
