from mal import EvaluatorFn
from mal import SExpression
from mal.errors import MalArityError, MalSyntaxError
from mal.types.environment import Environment
from mal.types.symbol import Symbol
from mal.types.tail_call import TailCall


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """
    (let* (name1 expr1 name2 expr2 ...) body)
    Each expression sees the bindings made before it; the body is a tail call.
    """
    if len(tail) != 2:
        raise MalArityError("let* requires a binding list and a body")

    bindings, body = tail
    if not isinstance(bindings, list) or len(bindings) % 2:
        raise MalSyntaxError("let* bindings must be a list of name/expression pairs")

    new_env = env.child()
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise MalSyntaxError(f"let* binding name must be a symbol, got {name!r}")
        new_env.define(name, evaluate_fn(val_expr, new_env))
    return TailCall(body, new_env)
