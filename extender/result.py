"""The outcome of an operation: either a value (ok) or an error (err)."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")

_UNWRAP_MESSAGE = "Result.Unwrap(): result is Err"


class ResultUnwrapError(Exception):
    """Raised when unwrapping a result that holds an error."""

    def __init__(self, message: str = _UNWRAP_MESSAGE) -> None:
        super().__init__(message)


class Result(Generic[T, E]):
    """Holds either a successful value or an error.

    ``kind`` is the value's type, used to build a default for error results.
    """

    __slots__ = ("_value", "_error", "_is_ok", "_kind")

    def __init__(
        self, value: Any = None, error: Any = None, is_ok: bool = False, kind: Any = None
    ) -> None:
        self._value = value
        self._error = error
        self._is_ok = is_ok
        self._kind = kind

    def unwrap(self) -> T:
        """Return the value, raising ResultUnwrapError for an error result."""
        if self._is_ok:
            return self._value
        cause = self._error if isinstance(self._error, BaseException) else None
        raise ResultUnwrapError() from cause

    def unwrap_or(self, value: T) -> T:
        """Return the value or the given default."""
        return self._value if self._is_ok else value

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        """Return the value or compute one with ``fn``."""
        return self._value if self._is_ok else fn()

    def unwrap_or_default(self) -> T:
        """Return the value or the default of its kind (``None`` if unknown)."""
        if self._is_ok:
            return self._value
        return self._kind() if self._kind is not None else None

    def error(self) -> E | None:
        """Return the error, or ``None`` for an ok result."""
        return self._error

    def is_err(self) -> bool:
        """Return True if the result holds an error."""
        return not self._is_ok

    def is_ok(self) -> bool:
        """Return True if the result holds a value."""
        return self._is_ok

    def and_(self, fn: Callable[[T], T]) -> Result[T, E]:
        """Apply ``fn`` to an ok value, leaving errors unchanged."""
        if self._is_ok:
            return Result(fn(self._value), None, True, self._kind)
        return self

    def and_then(self, fn: Callable[[T], Result[T, E]]) -> Result[T, E]:
        """Replace an ok result with the result returned by ``fn``."""
        if self._is_ok:
            return fn(self._value)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        if self._is_ok != other._is_ok:
            return False
        if self._is_ok:
            return self._value == other._value
        return self._error == other._error

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value if self._is_ok else self._error))

    def __repr__(self) -> str:
        return f"ok({self._value!r})" if self._is_ok else f"err({self._error!r})"


def ok(value: T) -> Result[T, Any]:
    """Create a successful result holding ``value``."""
    return Result(value, None, True, type(value) if value is not None else None)


def err(error: E, kind: Any = None) -> Result[Any, E]:
    """Create a failed result; ``kind`` is the type of the missing value."""
    return Result(None, error, False, kind)