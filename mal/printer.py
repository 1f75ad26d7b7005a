"""Printer: render values back to text.

Two modes:
- readable: strings are quoted and escaped so the output can be read back.
- display: strings are written raw, for human-facing output such as `str`.
"""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from mal import LispValue
from mal.errors import MalTypeError
from mal.types.closure import Closure
from mal.types.native import NativeFunction
from mal.types.nil import NilType
from mal.types.symbol import Symbol

STRING_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "\n": "\\n",
    '"': '\\"',
})


def render_number(value: float) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # Shortest round-tripping digits, always in positional notation
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def render_string(value: str, readable: bool) -> str:
    if not readable:
        return value
    return '"' + value.translate(STRING_ESCAPES) + '"'


def _write(buffer: StringIO, value: LispValue, readable: bool) -> None:
    match value:
        case list():
            buffer.write("(")
            for i, item in enumerate(value):
                if i:
                    buffer.write(" ")
                _write(buffer, item, readable)
            buffer.write(")")
        case bool():
            buffer.write("true" if value else "false")
        case int() | float():
            buffer.write(render_number(value))
        case str():
            buffer.write(render_string(value, readable))
        case Symbol():
            buffer.write(value.name)
        case NilType():
            buffer.write("nil")
        case Closure() | NativeFunction():
            buffer.write(repr(value))
        case _:
            raise MalTypeError(f"Cannot render {value!r}")


def render(value: LispValue, readable: bool = True) -> str:
    """Render `value` as text, escaping strings when `readable` is true."""
    with StringIO() as buffer:
        _write(buffer, value, readable)
        return buffer.getvalue()
