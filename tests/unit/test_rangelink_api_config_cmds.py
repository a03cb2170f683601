"""Unit tests for the config commands (show, validate, version)."""

import pytest

from rangelink.api.config.cmd_show import cmd_show
from rangelink.api.config.cmd_validate import cmd_validate
from rangelink.api.config.cmd_version import cmd_version
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.config


class TestCmdShow:
    def test_lists_sections(self, rangelink_home):
        result = run_cmd(cmd_show)
        assert result.success
        assert result.output["content"] == {"sections": ["delimiters", "log"]}
        assert result.output["config_path"].endswith("config.json")

    def test_shows_section(self, write_config):
        write_config({"delimiters": {"hash": "%"}})
        result = run_cmd(cmd_show, "delimiters")
        assert result.success
        assert result.output["content"] == {"hash": "%"}
        assert result.result == "Retrieved configuration for 'delimiters'"

    def test_unknown_section(self, rangelink_home):
        result = run_cmd(cmd_show, "colors")
        assert not result.success
        assert result.output["errors"] == ["Unknown section: colors"]

    def test_broken_config(self, rangelink_home):
        (rangelink_home / "config.json").write_text("[")
        result = run_cmd(cmd_show, "log")
        assert not result.success
        assert "Invalid JSON" in result.output["errors"][0]


class TestCmdValidate:
    def test_defaults_are_valid(self, rangelink_home):
        result = run_cmd(cmd_validate)
        assert result.success
        assert result.output["delimiters"] == {"line": "L", "position": "C", "hash": "#", "range": "-"}
        assert result.output["used_defaults"] is False
        assert result.output["warnings"] == []

    def test_user_delimiters(self, write_config):
        write_config({"delimiters": {"line": "line", "position": "pos"}})
        result = run_cmd(cmd_validate)
        assert result.success
        assert result.output["sources"] == {"line": "user", "position": "user", "hash": "default", "range": "default"}

    def test_reports_each_invalid_field(self, write_config):
        write_config({"delimiters": {"line": "L 1", "hash": "~"}})
        result = run_cmd(cmd_validate)
        assert not result.success
        assert result.result == "Found 2 delimiter error(s)"
        assert result.output["errors"][0].startswith("line: [CONFIG_DELIMITER_DIGITS]")
        assert result.output["errors"][1].startswith("hash: [CONFIG_DELIMITER_RESERVED]")
        assert result.output["used_defaults"] is True
        assert result.output["warnings"] == ["Falling back to default delimiters"]

    def test_relationship_error(self, write_config):
        write_config({"delimiters": {"line": "x", "range": "X"}})
        result = run_cmd(cmd_validate)
        assert not result.success
        assert "CONFIG_DELIMITER_NOT_UNIQUE" in result.output["errors"][0]

    def test_unloadable_config(self, write_config):
        write_config({"delimiters": {"lines": "L"}})
        result = run_cmd(cmd_validate)
        assert not result.success
        assert result.output["used_defaults"] is True


def test_cmd_version():
    result = run_cmd(cmd_version)
    assert result.success
    output = result.output
    assert output["version"]
    assert output["full_version"].startswith(output["version"])
    assert result.result == f"RangeLink version: {output['full_version']}"
