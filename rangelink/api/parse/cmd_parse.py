"""Parse command - decode a single link."""

from collections.abc import Iterator

from .._output_schemas.parse import ParseParseOutput
from ..config.RangeLinkConfig import RangeLinkConfig
from ..StageResult import StageResult
from .parse_link import parse_link


def cmd_parse(text: str) -> StageResult:
    """Parse ``text`` as a link using the configured delimiters."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        warnings: list[str] = []

        yield (0.3, "Loading configuration...")
        try:
            config = RangeLinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = "Configuration could not be loaded"
            result_obj.output = ParseParseOutput(errors=[str(e)], warnings=[], text=text, parsed=None).model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        loaded = config.resolve_delimiters()
        if loaded.used_defaults:
            warnings.extend(f"Ignoring delimiter settings: {error}" for error in loaded.errors)

        yield (0.7, "Parsing link...")
        parsed = parse_link(text, loaded.delimiters)

        yield (1.0, "Complete")
        if not parsed.success:
            result_obj.result = "Not a valid link"
            result_obj.output = ParseParseOutput(
                errors=[str(parsed.error)],
                warnings=warnings,
                text=text,
                parsed=None,
                error=parsed.error.to_dict(),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        link = parsed.value
        result_obj.result = f"Parsed link to {link.path}"
        result_obj.output = ParseParseOutput(
            errors=[],
            warnings=warnings,
            text=text,
            parsed=link.to_dict(),
            error=None,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Parsing link...", progress_callback=do_work)
