"""Helpers for working with lists."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable, MutableSequence, Sequence, TypeVar

from extender.option import Option, none, some

T = TypeVar("T")
U = TypeVar("U")


def _key_from_less(less: Callable[[T, T], bool]):
    def compare(a: T, b: T) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return cmp_to_key(compare)


def sort(items: list[T], less: Callable[[T, T], bool]) -> None:
    """Sort ``items`` in place using the ``less`` ordering."""
    items.sort(key=_key_from_less(less))


def sort_stable(items: list[T], less: Callable[[T, T], bool]) -> None:
    """Sort ``items`` in place, keeping equal elements in their original order."""
    items.sort(key=_key_from_less(less))


def reverse(items: MutableSequence[T]) -> None:
    """Reverse ``items`` in place."""
    items.reverse()


def retain(items: Iterable[T], fn: Callable[[T], bool]) -> list[T]:
    """Return a new list of the elements for which ``fn`` returns True."""
    return [v for v in items if fn(v)]


def reduce(items: Sequence[T], fn: Callable[[T, T], T]) -> Option[T]:
    """Reduce ``items`` to one value, or an empty option when there are none.

    The accumulator starts as the first element, and every element,
    including the first, is then folded into it.
    """
    if not items:
        return none()
    accum = items[0]
    for v in items:
        accum = fn(accum, v)
    return some(accum)


def filter_out(items: Iterable[T], fn: Callable[[T], bool]) -> list[T]:
    """Return a new list without the elements for which ``fn`` returns True."""
    return [v for v in items if not fn(v)]


def fold(items: Iterable[T] | None, init: U, fn: Callable[[U, T], U]) -> U:
    """Combine every element of ``items`` into one accumulated value."""
    accum = init
    for v in items or ():
        accum = fn(accum, v)
    return accum