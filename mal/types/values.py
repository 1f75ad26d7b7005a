"""Variant tags and predicates over the closed set of mal values."""

from __future__ import annotations

from mal import LispValue
from mal.errors import MalTypeError
from mal.types.closure import Closure
from mal.types.native import NativeFunction
from mal.types.nil import NilType
from mal.types.symbol import Symbol


def type_name(value: LispValue) -> str:
    """Return the variant tag of `value`; raise MalTypeError for foreign objects."""
    match value:
        # bool before numbers: True is an int to Python, not a number to mal
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case Symbol():
            return "symbol"
        case NilType():
            return "nil"
        case list():
            return "list"
        case Closure():
            return "closure"
        case NativeFunction():
            return "native-function"
    raise MalTypeError(f"Not a mal value: {value!r}")


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value: LispValue) -> bool:
    """Only nil and false are falsy; 0, "" and () are all true."""
    return not (isinstance(value, NilType) or value is False)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: same tag, element-wise for lists, value otherwise."""
    if type_name(a) != type_name(b):
        return False
    if isinstance(a, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    return a == b
