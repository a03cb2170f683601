"""Unit tests for rangelink.api.errors.RangeLinkError."""

import pytest

from rangelink.api.delimiter import DelimiterConfig
from rangelink.api.errors import RangeLinkError, RangeLinkErrorCode

pytestmark = pytest.mark.codec


def test_str_includes_code():
    error = RangeLinkError(RangeLinkErrorCode.PARSE_EMPTY_PATH, "Path cannot be empty")
    assert str(error) == "[PARSE_EMPTY_PATH] Path cannot be empty"
    assert error.details == {}
    assert error.cause is None


def test_cause_is_chained():
    cause = ValueError("boom")
    error = RangeLinkError(RangeLinkErrorCode.PARSE_EMPTY_LINK, "wrapped", cause=cause)
    assert error.cause is cause
    assert error.__cause__ is cause


def test_to_dict_makes_details_serializable():
    error = RangeLinkError(
        RangeLinkErrorCode.PARSE_DELIMITERS_AMBIGUOUS,
        "bad",
        function_name="parse_link",
        details={
            "metadata": ("#", "L"),
            "delimiters": DelimiterConfig(line="L", position="C", hash="#", range="-"),
            "nested": {1: object},
        },
    )
    data = error.to_dict()
    assert data["code"] == "PARSE_DELIMITERS_AMBIGUOUS"
    assert data["function_name"] == "parse_link"
    assert data["details"]["metadata"] == ["#", "L"]
    assert data["details"]["delimiters"] == {"line": "L", "position": "C", "hash": "#", "range": "-"}
    assert data["details"]["nested"] == {"1": str(object)}


def test_codes_equal_their_names():
    assert all(code.value == code.name for code in RangeLinkErrorCode)


def test_can_be_raised():
    with pytest.raises(RangeLinkError, match="SELECTION_EMPTY"):
        raise RangeLinkError(RangeLinkErrorCode.SELECTION_EMPTY, "No selections")
