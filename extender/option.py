"""An optional value that is either present (some) or absent (none)."""

from __future__ import annotations

import base64
import dataclasses
import json
from datetime import datetime
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class UnwrapError(Exception):
    """Raised when unwrapping an option that holds no value."""

    def __init__(self, message: str = "Option.Unwrap: option is None") -> None:
        super().__init__(message)


class Option(Generic[T]):
    """A value that may or may not be present.

    A present value may itself be ``None``; absence is tracked separately.
    ``kind`` is the value's type, used to build a default for absent options.
    """

    __slots__ = ("_value", "_is_some", "_kind")

    def __init__(self, value: Any = None, is_some: bool = False, kind: Any = None) -> None:
        self._value = value
        self._is_some = is_some
        self._kind = kind

    def is_some(self) -> bool:
        """Return True if a value is present."""
        return self._is_some

    def is_none(self) -> bool:
        """Return True if no value is present."""
        return not self._is_some

    def to_json(self) -> str:
        """Encode the value as JSON; an absent value encodes as ``null``."""
        if not self._is_some:
            return "null"
        return json.dumps(self._value, default=_json_default, separators=(",", ":"))

    def and_(self, fn: Callable[[T], T]) -> Option[T]:
        """Apply ``fn`` to a present value, keeping absence unchanged."""
        return Option(fn(self._value), True, self._kind) if self._is_some else self

    def and_then(self, fn: Callable[[T], Option[T]]) -> Option[T]:
        """Replace a present value with the option returned by ``fn``."""
        return fn(self._value) if self._is_some else self

    def unwrap(self) -> T:
        """Return the value, raising UnwrapError if it is absent."""
        if not self._is_some:
            raise UnwrapError()
        return self._value

    def unwrap_or(self, value: T) -> T:
        """Return the value or the given default."""
        return self._value if self._is_some else value

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        """Return the value or compute one with ``fn``."""
        return self._value if self._is_some else fn()

    def unwrap_or_default(self) -> T:
        """Return the value or the default of its kind (``None`` if unknown)."""
        if self._is_some:
            return self._value
        return self._kind() if self._kind is not None else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self._is_some != other._is_some:
            return False
        return not self._is_some or self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_some, self._value if self._is_some else None))

    def __repr__(self) -> str:
        return f"some({self._value!r})" if self._is_some else "none()"


def some(value: T) -> Option[T]:
    """Create an option holding ``value``."""
    return Option(value, True, type(value) if value is not None else None)


def none(kind: Any = None) -> Option[Any]:
    """Create an empty option; ``kind`` is the type of the missing value."""
    return Option(None, False, kind)


def option_from_json(data: str | bytes, kind: Any = None) -> Option[Any]:
    """Decode JSON into an option; ``null`` decodes as an empty option.

    When ``kind`` is given the decoded value must fit it, otherwise
    ValueError is raised.
    """
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    if data == "null":
        return none(kind)
    value = _coerce(json.loads(data), kind)
    return Option(value, True, kind if kind is not None else type(value))


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Option):
        return obj._value if obj.is_some() else None
    if isinstance(obj, datetime):
        text = obj.isoformat()
        return text[:-6] + "Z" if text.endswith("+00:00") else text
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"value of type {type(obj).__name__} is not JSON serialisable")


def _coerce(value: Any, kind: Any) -> Any:
    if kind is None or kind is object:
        return value
    if kind is datetime and isinstance(value, str):
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    if kind is bytes and isinstance(value, str):
        return base64.b64decode(value)
    if kind is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if dataclasses.is_dataclass(kind) and isinstance(value, dict):
        names = {f.name for f in dataclasses.fields(kind)}
        return kind(**{k: v for k, v in value.items() if k in names})
    if isinstance(kind, type) and isinstance(value, kind):
        if not (kind is int and isinstance(value, bool)):
            return value
    name = getattr(kind, "__name__", repr(kind))
    raise ValueError(f"cannot decode JSON {type(value).__name__} into {name}")