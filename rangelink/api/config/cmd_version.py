"""Version command - returns RangeLink version information."""

import subprocess
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.config import ConfigVersionOutput
from ..StageResult import StageResult
from .get_package_version import get_package_version


def cmd_version() -> StageResult:
    """Get RangeLink version information."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Getting package version...")
        version = get_package_version()

        yield (0.6, "Checking git commit...")
        git_sha = ""
        try:
            project_root = Path(__file__).resolve().parents[3]
            sha_output = subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
                cwd=str(project_root),
            )
            git_sha = sha_output.decode().strip()
        except (OSError, subprocess.CalledProcessError):
            git_sha = ""

        yield (1.0, "Complete")

        full_version = f"{version} ({git_sha})" if git_sha else version

        result_obj.result = f"RangeLink version: {full_version}"
        result_obj.output = ConfigVersionOutput(
            errors=[],
            warnings=[],
            version=version,
            git_sha=git_sha,
            full_version=full_version,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Getting version information...", progress_callback=do_work)
