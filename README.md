# extender

Small building blocks for everyday Python code:

- `extender.option`: an `Option` type that either holds a value or holds nothing. A held value may itself be `None`. Options can be written to and read from JSON.
- `extender.result`: a `Result` type that holds either a success value or an error.
- `extender.maps`: folds over a dict and filters a dict in place.
- `extender.slices`: sorts, reverses, retains, filters out, reduces and folds lists.
- `extender.locks`: `Mutex` and `RWMutex` wrappers that hand out the value they guard only while the lock is held.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Option

```python
from extender.option import some, none, option_from_json

opt = some(1)
opt.is_some()                  # True
opt.and_(lambda v: v + 2)      # some(3)
opt.and_then(lambda v: none(int))  # none()

empty = none(int)
empty.is_none()                # True
empty.unwrap_or(3)             # 3
empty.unwrap_or_else(lambda: 2)  # 2
empty.unwrap_or_default()      # 0, built from the kind given to none()
empty.unwrap()                 # raises UnwrapError
```

Two options are equal when both are empty, or both hold equal values.

### JSON

`Option.to_json()` returns compact JSON text; an empty option gives `"null"`.
`datetime` values are written in ISO 8601 form (UTC as a trailing `Z`),
`bytes` as base64 text, and dataclass instances as objects.

`option_from_json(data, kind)` reads JSON text or bytes. `"null"` gives an
empty option; anything else gives an option holding the decoded value. When
`kind` is given the value is made to fit it (`datetime`, `bytes` from base64,
`float`, a dataclass from an object), and a value that does not fit raises
`ValueError`.

```python
some(5).to_json()              # "5"
none(int).to_json()            # "null"
option_from_json("null", int)  # none()
option_from_json("2", float)   # some(2.0)
```

## Result

```python
from extender.result import ok, err

r = ok(1)
r.is_ok()                      # True
r.and_(lambda v: v * 10).unwrap()  # 10

failure = err(EOFError(), int)
failure.is_err()               # True
failure.error()                # the EOFError instance
failure.unwrap_or(3)           # 3
failure.unwrap_or_default()    # 0
failure.unwrap()               # raises ResultUnwrapError, chained from the EOFError
```

`and_` and `and_then` leave an error result unchanged.

## Dicts and lists

```python
from extender import maps, slices

inverted = maps.fold({"0": 0, "1": 1}, {}, lambda acc, k, v: {**acc, v: k})
# {0: "0", 1: "1"}

d = {"0": 0, "1": 1, "2": 2, "3": 3}
maps.retain(d, lambda k, v: v < 1 or v > 2)     # d is now {"0": 0, "3": 3}

items = [0, 1, 2]
slices.sort(items, lambda a, b: a > b)          # items == [2, 1, 0]
slices.reverse(items)                           # items == [0, 1, 2]
slices.retain([0, 1, 2, 3], lambda v: 0 < v < 3)      # [1, 2]
slices.filter_out([0, 1, 2, 3], lambda v: 0 < v < 3)  # [0, 3]
slices.reduce([0, 1, 2], lambda acc, v: acc + v)      # some(3)
slices.reduce([], lambda acc, v: acc + v)             # none()
slices.fold([0, 1], [], lambda acc, v: acc + [str(v)])  # ["0", "1"]
```

`slices.sort` and `slices.sort_stable` take a "less than" function and sort
the list in place; both keep equal elements in their original order.
`slices.reduce` starts from the first element and then folds every element,
the first included, into it.

## Locks

```python
from extender.locks import Mutex, RWMutex

m = Mutex({})
guard = m.lock()
guard.value["foo"] = 1
guard.unlock()

with m.lock() as value:        # unlocked when the block ends
    value["bar"] = 2

m.perform_mut(lambda d: d.update(boo=1))
m.try_lock().is_ok()           # False while another guard holds the lock

rw = RWMutex({})
rw.perform_mut(lambda d: d.update(foo=1))
rw.perform(lambda d: print(d["foo"]))
rguard = rw.rlock()
rw.try_rlock().is_ok()         # True: readers share the lock
rw.try_lock().is_ok()          # False while a reader holds it
rguard.runlock()
```

`try_lock` and `try_rlock` return `ok(guard)` when the lock was taken and
`err(None)` when it was not. Releasing a guard twice raises `RuntimeError`.
In an `RWMutex`, a writer waiting for the lock holds off new readers.

## What the package does not do

Options are not converted to or from database column values; only JSON is
supported.

## Running the tests

```
pytest
```