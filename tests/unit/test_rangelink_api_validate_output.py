"""Unit tests for rangelink.api.validate_output."""

import pytest

from rangelink.api.format.cmd_format import cmd_format
from rangelink.api.parse.cmd_parse import cmd_parse
from rangelink.api.StageResult import StageResult
from rangelink.api.validate_output import validate_output

pytestmark = pytest.mark.unit


def test_valid_output_is_normalized():
    output = validate_output(cmd_parse, {"text": "a.ts#L1", "parsed": None})
    assert output == {"errors": [], "warnings": [], "text": "a.ts#L1", "parsed": None, "error": None}


def test_missing_field_fails():
    with pytest.raises(ValueError, match="Output validation failed for format.format"):
        validate_output(cmd_format, {"path": "a.ts"})


def test_function_outside_api_passes_through():
    def cmd_local():
        return None

    output = {"anything": 1}
    assert validate_output(cmd_local, output) is output


def test_stage_result_defaults():
    result = StageResult(announce="Working...", progress_callback=lambda _: iter(()))
    assert (result.result, result.output, result.success) == ("", {}, False)
