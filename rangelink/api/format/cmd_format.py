"""Format command - build a link from a path and selections."""

from collections.abc import Iterator

from .._output_schemas.format import FormatFormatOutput
from ..config.RangeLinkConfig import RangeLinkConfig
from ..StageResult import StageResult
from ..types.FormatOptions import FormatOptions
from ..types.LinkType import LinkType
from .format_link import format_link
from .parse_selection_arg import parse_selection_arg


def cmd_format(
    path: str,
    selections: list[str],
    portable: bool = False,
    full_line: bool | None = None,
) -> StageResult:
    """Format a link for ``path`` using the configured delimiters.

    Args:
        path: Path to encode
        selections: Selection arguments, ``LINE[:CHAR][-LINE[:CHAR]]`` each
        portable: Embed the delimiters in the link
        full_line: Force line-only (True) or positional (False) notation
    """
    link_type = LinkType.PORTABLE if portable else LinkType.REGULAR

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        def _fail(message: str, errors: list[str], delimiters: dict, error: dict | None = None) -> None:
            result_obj.result = message
            result_obj.output = FormatFormatOutput(
                errors=errors,
                warnings=warnings,
                path=path,
                link="",
                link_type=link_type.value,
                delimiters=delimiters,
                error=error,
            ).model_dump(mode="python")
            result_obj.success = False

        warnings: list[str] = []

        yield (0.2, "Loading configuration...")
        try:
            config = RangeLinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _fail("Configuration could not be loaded", [str(e)], {})
            return

        loaded = config.resolve_delimiters()
        if loaded.used_defaults:
            warnings.extend(f"Ignoring delimiter settings: {error}" for error in loaded.errors)
        delimiters = loaded.delimiters

        yield (0.5, "Parsing selections...")
        try:
            spans = [parse_selection_arg(value) for value in selections]
        except ValueError as e:
            yield (1.0, "Complete")
            _fail("Invalid selection argument", [str(e)], delimiters.model_dump())
            return

        yield (0.8, "Formatting link...")
        formatted = format_link(path, spans, delimiters, FormatOptions(is_full_line=full_line, link_type=link_type))

        yield (1.0, "Complete")
        if not formatted.success:
            _fail("Formatting failed", [str(formatted.error)], delimiters.model_dump(), formatted.error.to_dict())
            return

        result_obj.result = f"Formatted {link_type.value.lower()} link"
        result_obj.output = FormatFormatOutput(
            errors=[],
            warnings=warnings,
            path=path,
            link=formatted.value,
            link_type=link_type.value,
            delimiters=delimiters.model_dump(),
            error=None,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Formatting link for {path}...", progress_callback=do_work)
