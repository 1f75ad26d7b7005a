from __future__ import annotations

from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.errors import MalArityError
from mal.types.environment import Environment
from mal.types.nil import Nil
from mal.types.tail_call import TailCall
from mal.types.values import is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) not in (2, 3):
        raise MalArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)
    # Only nil and false are falsy
    if is_truthy(cond):
        return TailCall(tail[1], env)
    elif len(tail) > 2:
        return TailCall(tail[2], env)
    else:
        return Nil
