# vlerrors

A small exception hierarchy for libraries whose errors should carry a
readable message. For bad arguments, the error also records the function
and the parameter that were at fault.

## Installation

```
pip install vlerrors
```

## Usage

`VlException` is the base of the hierarchy. It carries a `message`, which
defaults to the empty string. `str()` of the exception returns that
message.

```python
from vlerrors.exceptions import VlException

try:
    raise VlException("ABC")
except VlException as e:
    print(e.message)  # ABC
    print(str(e))     # ABC
```

`ArgumentException` derives from `VlException`. It also records `function`,
the name of the function that rejected an argument, and `name`, the name
of that argument. Each of the three fields defaults to the empty string.
Its `repr()` shows all three fields.

```python
from vlerrors.exceptions import ArgumentException, VlException

def set_width(width):
    if width < 0:
        raise ArgumentException("Width must not be negative.", "set_width", "width")

try:
    set_width(-1)
except VlException as e:
    print(e.message)   # Width must not be negative.
    print(e.function)  # set_width
    print(e.name)      # width
```

Both classes derive from Python's `Exception`, so ordinary `except` clauses
catch them. Catch `VlException` to handle the whole hierarchy, or
`ArgumentException` to handle argument errors only.

## Running the tests

```
pip install -e ".[test]"
pytest
```