"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from rangelink.api.delimiter.DelimiterConfig import DelimiterConfig


def pytest_configure(config):
    for marker in ("unit", "integration", "smoke", "codec", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def custom_delimiters() -> DelimiterConfig:
    """Multi-character delimiter set used to exercise escaping and ambiguity rules."""
    return DelimiterConfig(line="line", position="pos", hash="!", range=">>")


@pytest.fixture
def rangelink_home(tmp_path: Path, monkeypatch) -> Path:
    """Point RANGELINK_HOME at an empty temporary directory (no config file)."""
    monkeypatch.setenv("RANGELINK_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_config(rangelink_home: Path):
    """Write a config.json into the temporary RangeLink home."""

    def _write(data: dict) -> Path:
        path = rangelink_home / "config.json"
        path.write_text(json.dumps(data))
        return path

    return _write


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
