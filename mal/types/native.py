from __future__ import annotations

from typing import Callable

from mal import LispValue
from mal.types.environment import Environment

NativeFn = Callable[[Environment, list[LispValue]], LispValue]


class NativeFunction:
    """A host callable exposed to mal code.

    The wrapped function receives the calling environment and the list of
    already-evaluated arguments, and returns a value.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self):
        return f"#<native-function {self.name}>"
