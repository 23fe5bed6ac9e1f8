from extender.option import none, some
from extender.slices import (
    filter_out,
    fold,
    reduce,
    retain,
    reverse,
    sort,
    sort_stable,
)


def test_sort():
    s = [0, 1, 2]
    sort(s, lambda i, j: i > j)
    assert s == [2, 1, 0]


def test_sort_stable():
    s = [0, 1, 1, 2]
    sort_stable(s, lambda i, j: i > j)
    assert s == [2, 1, 1, 0]


def test_sort_stable_keeps_order_of_equals():
    s = [("b", 1), ("a", 0), ("c", 1), ("d", 0)]
    sort_stable(s, lambda x, y: x[1] < y[1])
    assert s == [("a", 0), ("d", 0), ("b", 1), ("c", 1)]


def test_reverse():
    s = [1, 2]
    reverse(s)
    assert s == [2, 1]

    s = [1, 2, 3]
    reverse(s)
    assert s == [3, 2, 1]


def test_retain():
    s = retain([0, 1, 2, 3], lambda v: 0 < v < 3)
    assert s == [1, 2]


def test_retain_leaves_input_untouched():
    original = [0, 1, 2, 3]
    retain(original, lambda v: v > 1)
    assert original == [0, 1, 2, 3]


def test_reduce():
    assert reduce([0, 1, 2], lambda accum, current: accum + current) == some(3)


def test_reduce_empty():
    assert reduce([], lambda accum, current: accum + current) == none(int)


def test_filter_out():
    s = filter_out([0, 1, 2, 3], lambda v: 0 < v < 3)
    assert s == [0, 3]


def test_fold():
    s = fold([0, 1, 2, 3], [], lambda accum, v: accum + [str(v)])
    assert s == ["0", "1", "2", "3"]


def test_fold_nothing_returns_init():
    assert fold(None, None, lambda accum, v: (accum or []) + [str(v)]) is None
    assert fold([], [], lambda accum, v: accum + [str(v)]) == []