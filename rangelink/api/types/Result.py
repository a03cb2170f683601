"""Result value object: either a success value or an error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..errors.RangeLinkError import RangeLinkError
from ..errors.RangeLinkErrorCode import RangeLinkErrorCode

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Success or failure of a pure operation.

    Build with ``Result.ok(value)`` or ``Result.err(error)`` and check
    ``success`` before reading ``value`` or ``error``.
    """

    success: bool
    _value: Any = None
    _error: Any = None

    @classmethod
    def ok(cls, value: T) -> Result[T, Any]:
        return cls(True, value, None)

    @classmethod
    def err(cls, error: E) -> Result[Any, E]:
        return cls(False, None, error)

    @property
    def value(self) -> T:
        if not self.success:
            raise RangeLinkError(
                RangeLinkErrorCode.RESULT_VALUE_ACCESS_ON_ERROR,
                "Cannot access value on an error Result. Check .success before accessing .value",
                function_name="Result.value",
            )
        return self._value

    @property
    def error(self) -> E:
        if self.success:
            raise RangeLinkError(
                RangeLinkErrorCode.RESULT_ERROR_ACCESS_ON_SUCCESS,
                "Cannot access error on a successful Result. Check .success before accessing .error",
                function_name="Result.error",
            )
        return self._error

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            value = self._value.to_dict() if hasattr(self._value, "to_dict") else self._value
            return {"success": True, "value": value}
        error = self._error.to_dict() if hasattr(self._error, "to_dict") else self._error
        return {"success": False, "error": error}
