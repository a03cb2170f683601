"""Parse RangeLink text into a ParsedLink."""

import logging
import re
from typing import Any

from ...constants import MAX_LINE_NUMBER, MAX_LINK_LENGTH
from ..delimiter.DEFAULT_DELIMITERS import DEFAULT_DELIMITERS
from ..delimiter.DelimiterConfig import DelimiterConfig
from ..errors.RangeLinkError import RangeLinkError
from ..errors.RangeLinkErrorCode import RangeLinkErrorCode
from ..pattern.build_range_source import build_range_source
from ..pattern.escape_regex import escape_regex
from ..quoting.quote_path import quote_path
from ..quoting.unquote_path import unquote_path
from ..types.LinkType import LinkType
from ..types.ParsedLink import ParsedLink
from ..types.Position import Position
from ..types.Result import Result
from ..types.SelectionKind import SelectionKind
from .resolve_portable_delimiters import resolve_portable_delimiters
from .split_portable_metadata import split_portable_metadata

logger = logging.getLogger(__name__)

_WEB_URL = re.compile(r"(?:[hH][tT][tT][pP][sS]?|[fF][tT][pP])://")
# Unlike the detection pattern this accepts an empty quoted path, so it is reported as such
_QUOTED_PATH = r"'(?:'\\''|[^'\n])*'"


def _error(code: RangeLinkErrorCode, message: str, **details: Any) -> Result[ParsedLink, RangeLinkError]:
    return Result.err(RangeLinkError(code, message, function_name="parse_link", details=details))


def parse_link(text: str, delimiters: DelimiterConfig | None = None) -> Result[ParsedLink, RangeLinkError]:
    """Parse a RangeLink.

    Accepted shapes, each optionally followed by portable metadata:

    - ``src/auth.ts#L42C10-L58C25`` (``#`` may also appear in the path)
    - ``'My Folder/a.ts'#L10`` (quoted path)
    - ``'My Folder/a.ts#L10'`` (whole link quoted, as ``quote_link`` emits)
    - ``src/a.ts##L10C5-L12C10`` (rectangular)

    Args:
        text: Link text
        delimiters: Delimiters to parse with; ``DEFAULT_DELIMITERS`` when None.
            Portable links use their embedded delimiters instead.

    Returns:
        Result with the ParsedLink, or a ``PARSE_*`` error.
    """
    if len(text) > MAX_LINK_LENGTH:
        return _error(
            RangeLinkErrorCode.PARSE_LINK_TOO_LONG,
            f"Link exceeds maximum length of {MAX_LINK_LENGTH} characters",
            received=len(text),
            maximum=MAX_LINK_LENGTH,
        )

    if not text or text.strip() == "":
        return _error(RangeLinkErrorCode.PARSE_EMPTY_LINK, "Link cannot be empty")

    if delimiters is None:
        logger.debug("No delimiter config provided for %r, using defaults", text)
        delimiters = DEFAULT_DELIMITERS

    link = unquote_path(text)
    whole_link_quoted = link != text

    if _WEB_URL.match(link):
        return _error(RangeLinkErrorCode.PARSE_URL_NOT_SUPPORTED, "Web URLs are not RangeLinks", link=link)

    body, metadata = split_portable_metadata(link)
    link_type = LinkType.REGULAR
    active = delimiters

    if metadata is not None:
        resolved = resolve_portable_delimiters(metadata, delimiters)
        if not resolved.success:
            return Result.err(resolved.error)
        active = resolved.value
        link_type = LinkType.PORTABLE
        logger.debug("Using delimiters embedded in portable link: %s", active.model_dump())

    parsed = _parse_body(body, active, whole_link_quoted, link_type)

    if link_type is LinkType.PORTABLE:
        if not parsed.success and parsed.error.code in (
            RangeLinkErrorCode.PARSE_NO_HASH_SEPARATOR,
            RangeLinkErrorCode.PARSE_INVALID_RANGE_FORMAT,
        ):
            return Result.err(
                RangeLinkError(
                    RangeLinkErrorCode.PARSE_PORTABLE_FORMAT_MISMATCH,
                    "Link does not use the delimiters declared in its metadata",
                    function_name="parse_link",
                    details={"body": body, "delimiters": active.model_dump()},
                    cause=parsed.error,
                )
            )
        if parsed.success and len(metadata) == 3 and parsed.value.start.character is not None:
            return _error(
                RangeLinkErrorCode.PARSE_PORTABLE_FORMAT_MISMATCH,
                "Line-only metadata cannot describe a link with character positions",
                body=body,
                metadata=metadata,
            )

    return parsed


def _parse_body(
    body: str,
    delimiters: DelimiterConfig,
    whole_link_quoted: bool,
    link_type: LinkType,
) -> Result[ParsedLink, RangeLinkError]:
    range_source = build_range_source(delimiters)

    quoted_match = re.fullmatch(f"(?P<path>{_QUOTED_PATH}){range_source}", body)
    if quoted_match is not None:
        match = quoted_match
        quoted_path = match["path"]
        path = unquote_path(quoted_path)
    else:
        if len(delimiters.hash) == 1:
            path_source = "(?P<path>.+?)"
        else:
            path_source = f"(?P<path>(?:(?!{escape_regex(delimiters.hash)}).)+)"
        match = re.fullmatch(f"{path_source}{range_source}", body, flags=re.DOTALL)
        if match is None:
            if body.startswith(delimiters.hash):
                return _error(RangeLinkErrorCode.PARSE_EMPTY_PATH, "Path cannot be empty")
            if delimiters.hash not in body:
                return _error(
                    RangeLinkErrorCode.PARSE_NO_HASH_SEPARATOR,
                    f"Link must contain {delimiters.hash} separator",
                    hash=delimiters.hash,
                )
            return _error(
                RangeLinkErrorCode.PARSE_INVALID_RANGE_FORMAT,
                "Invalid range format",
                link=body,
                delimiters=delimiters.model_dump(),
            )
        path = match["path"]
        quoted_path = quote_path(path) if whole_link_quoted else path

    if path == delimiters.hash or path.strip() == "":
        return _error(RangeLinkErrorCode.PARSE_EMPTY_PATH, "Path cannot be empty")

    selection_type = (
        SelectionKind.RECTANGULAR if len(match["hash"]) == len(delimiters.hash) * 2 else SelectionKind.NORMAL
    )

    start_line = int(match["start_line"])
    start_char = int(match["start_char"]) if match["start_char"] else None
    if match["end_line"]:
        end_line = int(match["end_line"])
        end_char = int(match["end_char"]) if match["end_char"] else None
    else:
        end_line, end_char = start_line, start_char

    for label, line in (("start", start_line), ("end", end_line)):
        if line < 1 or line > MAX_LINE_NUMBER:
            return _error(
                RangeLinkErrorCode.PARSE_LINE_OUT_OF_BOUNDS,
                f"{label.capitalize()} line must be between 1 and {MAX_LINE_NUMBER}",
                received=line,
                minimum=1,
                maximum=MAX_LINE_NUMBER,
                position=label,
            )

    if end_line < start_line:
        return _error(
            RangeLinkErrorCode.PARSE_LINE_BACKWARD,
            "End line cannot be before start line",
            start_line=start_line,
            end_line=end_line,
        )

    for label, char in (("start", start_char), ("end", end_char)):
        if char is not None and (char < 1 or char > MAX_LINE_NUMBER):
            return _error(
                RangeLinkErrorCode.PARSE_CHAR_OUT_OF_BOUNDS,
                f"{label.capitalize()} character must be between 1 and {MAX_LINE_NUMBER}",
                received=char,
                minimum=1,
                maximum=MAX_LINE_NUMBER,
                position=label,
            )

    if start_line == end_line and start_char is not None and end_char is not None and end_char < start_char:
        return _error(
            RangeLinkErrorCode.PARSE_CHAR_BACKWARD_SAME_LINE,
            "End character cannot be before start character on same line",
            start_char=start_char,
            end_char=end_char,
            line=start_line,
        )

    return Result.ok(
        ParsedLink(
            path=path,
            quoted_path=quoted_path,
            start=Position(start_line, start_char),
            end=Position(end_line, end_char),
            link_type=link_type,
            selection_type=selection_type,
        )
    )
