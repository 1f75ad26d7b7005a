"""Value model of the interpreter."""

from mal.types.symbol import Symbol
from mal.types.nil import Nil, NilType
from mal.types.environment import Environment
from mal.types.closure import Closure
from mal.types.native import NativeFunction
from mal.types.tail_call import TailCall
from mal.types.values import type_name, is_number, is_truthy, is_equal

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Environment",
    "Closure",
    "NativeFunction",
    "TailCall",
    "type_name",
    "is_number",
    "is_truthy",
    "is_equal",
]
