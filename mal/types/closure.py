"""Closure representation and argument binding for mal."""

from __future__ import annotations

from io import StringIO

from mal import SExpression, LispValue
from mal.errors import MalArityError
from mal.types.environment import Environment
from mal.types.symbol import Symbol


class Closure:
    """A first-class function: parameter symbols, a body form, and the defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<function (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def bind(self, args: list[LispValue]) -> Environment:
        """
        Bind argument values positionally to the parameters in a fresh child of
        the captured environment and return it.

        Raises MalArityError when the argument count differs from the
        parameter count.
        """
        if len(args) != len(self.params):
            raise MalArityError(
                f"{self} expects {len(self.params)} argument(s), got {len(args)}"
            )
        env = self.env.child()
        for param, arg in zip(self.params, args):
            env.define(param, arg)
        return env
