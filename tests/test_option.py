from dataclasses import dataclass
from datetime import datetime, timezone

import pytest

from extender.option import Option, UnwrapError, none, option_from_json, some


@dataclass
class Holder:
    s: str = ""


def test_and_variants():
    s = some(1)
    assert s.and_(lambda i: 3) == some(3)
    assert s.and_then(lambda i: some(3)) == some(3)
    assert s.and_then(lambda i: none(int)) == none(int)

    n = none(int)
    assert n.and_(lambda i: 3) == none(int)
    assert n.and_then(lambda i: some(3)) == none(int)
    assert n.and_then(lambda i: none(int)) == none(int)


def test_unwraps_on_none():
    empty = none(int)
    with pytest.raises(UnwrapError, match="Option.Unwrap: option is None"):
        empty.unwrap()
    assert empty.unwrap_or(3) == 3
    assert empty.unwrap_or_else(lambda: 2) == 2
    assert empty.unwrap_or_default() == 0


def test_unwraps_on_reference_kind():
    empty = none()
    with pytest.raises(UnwrapError, match="Option.Unwrap: option is None"):
        empty.unwrap()
    assert empty.unwrap_or(Holder("blah")) == Holder("blah")
    assert empty.unwrap_or_else(lambda: Holder("blah 2")) == Holder("blah 2")
    assert empty.unwrap_or_default() is None


def test_unwraps_on_some():
    value = some(7)
    assert value.unwrap() == 7
    assert value.unwrap_or(3) == 7
    assert value.unwrap_or_else(lambda: 2) == 7
    assert value.unwrap_or_default() == 7


def test_nil_option():
    value = some(None)
    assert value.is_none() is False
    assert value.is_some() is True
    assert value.unwrap() is None

    ret = none(Holder)
    assert ret.is_none() is True
    assert ret.is_some() is False
    with pytest.raises(UnwrapError):
        ret.unwrap()

    ret = some(Holder())
    assert ret.is_none() is False
    assert ret.is_some() is True
    assert ret.unwrap() == Holder()


def test_some_none_not_equal_to_none():
    assert some(None) != none()
    assert none(int) == none(str)


def test_to_json_datetime():
    ts = datetime(2023, 6, 13, 6, 34, tzinfo=timezone.utc)
    assert some(ts).to_json() == '"2023-06-13T06:34:00Z"'


def test_to_json_none_is_null():
    assert none(datetime).to_json() == "null"


def test_to_json_nested_option_in_dict():
    assert some({"ts": none()}).to_json() == '{"ts":null}'


def test_from_json_null():
    result = option_from_json("null", int)
    assert result == none(int)
    assert result.unwrap_or_default() == 0


def test_from_json_value():
    assert option_from_json("5", int) == some(5)
    assert option_from_json(b'"abc"', str) == some("abc")


def test_from_json_wrong_kind():
    with pytest.raises(ValueError):
        option_from_json('"x"', int)


def test_from_json_invalid():
    with pytest.raises(ValueError):
        option_from_json("{not json", None)


def test_datetime_json_round_trip():
    ts = datetime(2023, 6, 13, 6, 34, 32, tzinfo=timezone.utc)
    encoded = some(ts).to_json()
    assert option_from_json(encoded, datetime) == some(ts)


def test_dataclass_json_round_trip():
    encoded = some(Holder("x")).to_json()
    assert encoded == '{"s":"x"}'
    assert option_from_json(encoded, Holder) == some(Holder("x"))


def test_repr():
    assert repr(some(3)) == "some(3)"
    assert repr(none()) == "none()"


def test_option_class_direct_construction():
    assert Option(4, True) == some(4)