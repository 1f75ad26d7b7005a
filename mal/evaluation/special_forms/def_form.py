from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.errors import MalArityError, MalTypeError
from mal.types.environment import Environment
from mal.types.symbol import Symbol


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name expr)
    Binds in the innermost environment only and returns the bound value.
    """
    if len(tail) != 2:
        raise MalArityError("def! requires a name and a value expression")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalTypeError(f"def! name must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
