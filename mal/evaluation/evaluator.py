"""Core evaluator and trampoline for the mal interpreter.

`evaluate0` performs one step: it either produces a final value or returns a
TailCall naming the next (ast, env) pair. `evaluate` loops over those steps,
so every tail position (let* body, last form of do, if branches, closure
bodies) runs in constant Python stack.
"""

from __future__ import annotations

from mal import SExpression, LispValue
from mal.errors import MalRecursionError
from mal.evaluation.apply import apply
from mal.evaluation.special_forms import SPECIAL_FORMS
from mal.types.environment import Environment
from mal.types.symbol import Symbol
from mal.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: tail-call aware evaluation.
    """
    try:
        result = evaluate0(expr, env)
        while isinstance(result, TailCall):
            result = evaluate0(result.ast, result.env)
    except RecursionError as e:
        raise MalRecursionError("Maximum evaluation depth exceeded") from e
    return result


def evaluate0(expr: SExpression, env: Environment) -> LispValue | TailCall:
    """
    Single evaluation step. Returns either a value or a TailCall.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [_, *_]:
            # Operator and operands alike, left to right, none in tail position
            fn, *args = [evaluate(item, env) for item in expr]
            return apply(fn, args, env)

    # --- Atoms and the empty list return as-is ---
    return expr
