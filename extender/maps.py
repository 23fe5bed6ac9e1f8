"""Helpers for working with dictionaries."""

from __future__ import annotations

from typing import Callable, MutableMapping, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")
U = TypeVar("U")


def fold(mapping: Mapping[K, V], init: U, fn: Callable[[U, K, V], U]) -> U:
    """Combine every key and value of ``mapping`` into one accumulated value."""
    accum = init
    for key, value in mapping.items():
        accum = fn(accum, key, value)
    return accum


def retain(mapping: MutableMapping[K, V], fn: Callable[[K, V], bool]) -> None:
    """Remove, in place, every entry for which ``fn`` returns False."""
    for key in [k for k, v in mapping.items() if not fn(k, v)]:
        del mapping[key]