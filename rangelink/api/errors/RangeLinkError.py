"""Structured error carried by every failed RangeLink Result."""

from typing import Any

from .RangeLinkErrorCode import RangeLinkErrorCode


class RangeLinkError(Exception):
    """Error with a typed code, the originating function and contextual details.

    Core functions return these inside a ``Result`` instead of raising them,
    so callers scanning many inputs can keep going.
    """

    def __init__(
        self,
        code: RangeLinkErrorCode,
        message: str,
        function_name: str | None = None,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.function_name = function_name
        self.details = details or {}
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"RangeLinkError(code={self.code.value!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and CLI output."""
        return {
            "code": self.code.value,
            "message": self.message,
            "function_name": self.function_name,
            "details": {key: _jsonable(value) for key, value in self.details.items()},
        }


def _jsonable(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _jsonable(item) for key, item in value.items()}
    if hasattr(value, "model_dump"):
        return value.model_dump()
    return str(value)
