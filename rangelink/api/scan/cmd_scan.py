"""Scan command - list the links found in a file or stdin."""

import sys
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.scan import ScanScanOutput
from ..config.RangeLinkConfig import RangeLinkConfig
from ..StageResult import StageResult
from .find_links_in_text import find_links_in_text


def cmd_scan(source: str = "-", include_unparsed: bool = False) -> StageResult:
    """Scan ``source`` (a file path, or ``-`` for stdin) for links.

    Args:
        source: File to read, ``-`` reads stdin
        include_unparsed: Report pattern matches that fail to parse too
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        def _fail(message: str, errors: list[str]) -> None:
            result_obj.result = message
            result_obj.output = ScanScanOutput(
                errors=errors, warnings=warnings, source=source, links=[], count=0, unparsed_count=0
            ).model_dump(mode="python")
            result_obj.success = False

        warnings: list[str] = []

        yield (0.2, "Loading configuration...")
        try:
            config = RangeLinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _fail("Configuration could not be loaded", [str(e)])
            return

        loaded = config.resolve_delimiters()
        if loaded.used_defaults:
            warnings.extend(f"Ignoring delimiter settings: {error}" for error in loaded.errors)

        yield (0.4, "Reading text...")
        try:
            text = sys.stdin.read() if source == "-" else Path(source).expanduser().read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            yield (1.0, "Complete")
            _fail(f"Could not read {source}", [str(e)])
            return

        yield (0.7, "Scanning for links...")
        links = [link.to_dict() for link in find_links_in_text(text, loaded.delimiters, include_unparsed=include_unparsed)]
        unparsed_count = sum(1 for link in links if link["parsed"] is None)

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(links) - unparsed_count} link(s)"
        result_obj.output = ScanScanOutput(
            errors=[],
            warnings=warnings,
            source=source,
            links=links,
            count=len(links) - unparsed_count,
            unparsed_count=unparsed_count,
        ).model_dump(mode="python")
        result_obj.success = True

    announce = "Scanning stdin for links..." if source == "-" else f"Scanning {source} for links..."
    return StageResult(announce=announce, progress_callback=do_work)
