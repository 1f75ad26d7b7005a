from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.errors import MalArityError, MalSyntaxError
from mal.types.closure import Closure
from mal.types.environment import Environment
from mal.types.symbol import Symbol


def fn_form(
    tail: list[SExpression],
    env: Environment,
    _: EvaluatorFn,
) -> LispValue:
    """
    (fn* (params...) body)
    Captures the current environment; the body is not evaluated here.
    """
    if len(tail) != 2:
        raise MalArityError("fn* requires a parameter list and a body")

    params, body = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise MalSyntaxError(f"fn* parameters must be a list of symbols, got {params!r}")
    return Closure(list(params), body, env)
