"""Rebuild the DelimiterConfig embedded in a portable link."""

from ..delimiter.DEFAULT_DELIMITERS import DEFAULT_DELIMITERS
from ..delimiter.DelimiterConfig import DelimiterConfig
from ..delimiter.validate_delimiter_config import validate_delimiter_config
from ..errors.RangeLinkError import RangeLinkError
from ..errors.RangeLinkErrorCode import RangeLinkErrorCode
from ..types.Result import Result


def resolve_portable_delimiters(
    fields: list[str],
    local: DelimiterConfig,
) -> Result[DelimiterConfig, RangeLinkError]:
    """Turn metadata fields (hash, line, range[, position]) into a validated config.

    Line-only links carry three fields. The position delimiter is then
    borrowed from ``local``, or from the defaults when the local one clashes
    with the embedded symbols.
    """
    hash_, line, range_ = fields[0], fields[1], fields[2]

    if len(fields) == 4:
        candidates = [fields[3]]
    else:
        candidates = [local.position, DEFAULT_DELIMITERS.position]

    errors: list[RangeLinkError] = []
    for position in candidates:
        candidate = DelimiterConfig(line=line, position=position, hash=hash_, range=range_)
        errors = validate_delimiter_config(candidate)
        if not errors:
            return Result.ok(candidate)

    return Result.err(
        RangeLinkError(
            RangeLinkErrorCode.PARSE_DELIMITERS_AMBIGUOUS,
            "Embedded delimiter metadata is not a valid delimiter configuration",
            function_name="parse_link",
            details={
                "metadata": fields,
                "errors": [error.to_dict() for error in errors],
            },
            cause=errors[0] if errors else None,
        )
    )
