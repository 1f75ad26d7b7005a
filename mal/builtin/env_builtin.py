"""Built-in functions for the mal root environment.

This module defines arithmetic, comparison, equality, list helpers, output,
string conversion, file reading and re-entry into the reader and evaluator.
Every builtin takes the calling environment and a list of evaluated arguments.
"""
from __future__ import annotations

import logging
import math
import sys
from pathlib import Path
from typing import IO, Optional

from mal import LispValue
from mal.errors import MalArityError, MalIOError, MalTypeError
from mal.evaluation.evaluator import evaluate
from mal.printer import render
from mal.reader.parser import read_str
from mal.types.environment import Environment
from mal.types.native import NativeFunction
from mal.types.nil import Nil, NilType
from mal.types.symbol import Symbol
from mal.types.values import is_equal, is_number, type_name

logger = logging.getLogger(__name__)


def _numbers(name: str, expr: list[LispValue]) -> list[LispValue]:
    for x in expr:
        if not is_number(x):
            raise MalTypeError(f"All arguments to {name} must be numbers, got {type_name(x)}")
    return expr


def _exactly(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        raise MalArityError(f"{name} requires exactly {n} argument(s), got {len(expr)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> float:
    """Return the numeric sum of all arguments; (+) is 0."""
    return float(sum(_numbers("+", expr)))


def sub(env: Environment, expr: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise MalArityError("- requires at least 1 argument")
    first, *rest = _numbers("-", expr)
    if not rest:
        return float(-first)
    result = float(first)
    for x in rest:
        result -= x
    return result


def mul(env: Environment, expr: list[LispValue]) -> float:
    """Return the product of all arguments; (*) is 1."""
    result = 1.0
    for x in _numbers("*", expr):
        result *= x
    return result


def ieee_divide(a: float, b: float) -> float:
    """a / b with IEEE-754 results for a zero divisor instead of an exception."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def div(env: Environment, expr: list[LispValue]) -> float:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not expr:
        raise MalArityError("/ requires at least 1 argument")
    first, *rest = _numbers("/", expr)
    if not rest:
        return ieee_divide(1.0, first)
    result = float(first)
    for x in rest:
        result = ieee_divide(result, x)
    return result


# -------------------------------
# Comparison and equality
# -------------------------------
def lt(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable less-than: true if a0 < a1 < a2 ... holds for all pairs."""
    _numbers("<", expr)
    return all(a < b for a, b in zip(expr, expr[1:]))


def lte(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable less-or-equal: true if a0 <= a1 <= a2 ... holds for all pairs."""
    _numbers("<=", expr)
    return all(a <= b for a, b in zip(expr, expr[1:]))


def gt(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable greater-than: true if a0 > a1 > a2 ... holds for all pairs."""
    _numbers(">", expr)
    return all(a > b for a, b in zip(expr, expr[1:]))


def gte(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable greater-or-equal: true if a0 >= a1 >= a2 ... holds for all pairs."""
    _numbers(">=", expr)
    return all(a >= b for a, b in zip(expr, expr[1:]))


def equals(env: Environment, expr: list[LispValue]) -> bool:
    """True if every argument is structurally equal to the first."""
    if not expr:
        raise MalArityError("= requires at least 1 argument")
    first = expr[0]
    return all(is_equal(first, other) for other in expr[1:])


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    return list(expr)


def is_list(env: Environment, expr: list[LispValue]) -> bool:
    _exactly("list?", expr, 1)
    return isinstance(expr[0], list)


def is_empty(env: Environment, expr: list[LispValue]) -> bool:
    _exactly("empty?", expr, 1)
    seq = expr[0]
    if isinstance(seq, NilType):
        return True
    if not isinstance(seq, list):
        raise MalTypeError(f"empty? expects a list, got {type_name(seq)}")
    return not seq


def count(env: Environment, expr: list[LispValue]) -> float:
    _exactly("count", expr, 1)
    seq = expr[0]
    if isinstance(seq, NilType):
        return 0.0
    if not isinstance(seq, list):
        raise MalTypeError(f"count expects a list, got {type_name(seq)}")
    return float(len(seq))


# -------------------------------
# Strings and output
# -------------------------------
def str_builtin(env: Environment, expr: list[LispValue]) -> str:
    """Concatenate the display renderings of all arguments."""
    return "".join(render(x, readable=False) for x in expr)


def make_prn(out: Optional[IO[str]] = None):
    def prn(env: Environment, expr: list[LispValue]) -> NilType:
        """Write readable renderings, space separated, as one line; return nil."""
        print(" ".join(render(x, readable=True) for x in expr), file=sys.stdout if out is None else out)
        return Nil
    return prn


def slurp(env: Environment, expr: list[LispValue]) -> str:
    """Return the entire contents of the named file as text."""
    _exactly("slurp", expr, 1)
    path = expr[0]
    if not isinstance(path, str):
        raise MalTypeError(f"slurp expects a file name string, got {type_name(path)}")
    logger.debug("slurp %s", path)
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalIOError(f"Cannot read {path}: {e}") from e


# -------------------------------
# Reader / evaluator re-entry
# -------------------------------
def read_string(env: Environment, expr: list[LispValue]) -> LispValue:
    _exactly("read-string", expr, 1)
    source = expr[0]
    if not isinstance(source, str):
        raise MalTypeError(f"read-string expects a string, got {type_name(source)}")
    return read_str(source)


def make_eval(root: Environment):
    def eval_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
        """Evaluate a value in the root environment, not the caller's."""
        _exactly("eval", expr, 1)
        return evaluate(expr[0], root)
    return eval_builtin


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment, out: Optional[IO[str]] = None) -> None:
    """Install every builtin into `env`; `eval` targets `env` itself.

    `out` is the sink for prn; it defaults to sys.stdout resolved at call time.
    """
    builtins = {
        '+': add,
        '-': sub,
        '*': mul,
        '/': div,
        '<': lt,
        '<=': lte,
        '>': gt,
        '>=': gte,
        '=': equals,
        'list': list_builtin,
        'list?': is_list,
        'empty?': is_empty,
        'count': count,
        'prn': make_prn(out),
        'str': str_builtin,
        'slurp': slurp,
        'read-string': read_string,
        'eval': make_eval(env),
    }
    env.update({Symbol(name): NativeFunction(name, fn) for name, fn in builtins.items()})
