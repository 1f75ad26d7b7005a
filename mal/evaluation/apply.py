"""Application engine for mal.

Centralizes function application for the evaluator:
- Native functions are called directly and their result returned.
- Closures bind their arguments in a child of the captured environment and
  hand the body back to the trampoline as a TailCall, so user-level calls in
  tail position never grow the Python stack.
"""

from __future__ import annotations

from mal import LispValue
from mal.errors import MalNotCallable
from mal.printer import render
from mal.types.closure import Closure
from mal.types.environment import Environment
from mal.types.native import NativeFunction
from mal.types.tail_call import TailCall


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
) -> LispValue | TailCall:
    """Apply either a Closure or a NativeFunction to evaluated arguments.

    Raises MalNotCallable for any other head value.
    """
    match head:
        case Closure():
            return TailCall(head.body, head.bind(args))
        case NativeFunction():
            return head(env, args)
    raise MalNotCallable(f"{render(head)} is not a function")
