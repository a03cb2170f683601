"""Validate the delimiter configuration."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigValidateOutput
from ..delimiter.DEFAULT_DELIMITERS import DEFAULT_DELIMITERS
from ..StageResult import StageResult
from .get_config_path import get_config_path
from .RangeLinkConfig import RangeLinkConfig


def cmd_validate() -> StageResult:
    """Check the configured delimiters and report every problem found.

    Invalid delimiters are reported as errors together with the default set
    that would be used instead.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(get_config_path())
        yield (0.3, "Loading configuration...")
        try:
            config = RangeLinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = "Configuration could not be loaded"
            result_obj.output = ConfigValidateOutput(
                errors=[str(e)],
                warnings=[],
                config_path=config_path,
                delimiters=DEFAULT_DELIMITERS.model_dump(),
                sources=dict.fromkeys(("line", "position", "hash", "range"), "default"),
                used_defaults=True,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Validating delimiters...")
        loaded = config.resolve_delimiters()
        errors = []
        for error in loaded.errors:
            field = error.details.get("field")
            errors.append(f"{field}: {error}" if field else str(error))

        warnings = []
        if loaded.used_defaults:
            warnings.append("Falling back to default delimiters")

        yield (1.0, "Complete")
        result_obj.result = "Delimiter configuration is valid" if not errors else f"Found {len(errors)} delimiter error(s)"
        result_obj.output = ConfigValidateOutput(
            errors=errors,
            warnings=warnings,
            config_path=config_path,
            delimiters=loaded.delimiters.model_dump(),
            sources=dict(loaded.sources),
            used_defaults=loaded.used_defaults,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(announce="Validating delimiter configuration...", progress_callback=do_work)
