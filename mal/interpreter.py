"""Embedding entry points for the mal interpreter.

    parse(text)                 -> value      (first form of text)
    evaluate(value, env)        -> value
    render(value, readable)     -> text
    make_root_environment(out)  -> Environment with builtins and prelude

The read-loop that drives these lives outside the package.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Optional

from mal import LispValue
from mal.builtin.env_builtin import register
from mal.config import get_prelude_files, get_recursion_limit
from mal.evaluation.evaluator import evaluate
from mal.printer import render
from mal.reader.parser import parse_all, read_str as parse
from mal.types.environment import Environment
from mal.types.nil import Nil
from mal.types.symbol import Symbol

__all__ = [
    "parse",
    "parse_all",
    "evaluate",
    "render",
    "make_root_environment",
    "Interpreter",
]

logger = logging.getLogger(__name__)


def eval_source(source: str, env: Environment) -> LispValue:
    """Evaluate every top-level form of `source` in `env`; return the last value."""
    # Read everything first so malformed input defines nothing
    forms = list(parse_all(source))
    result: LispValue = Nil
    for expr in forms:
        result = evaluate(expr, env)
    return result


def load_prelude(env: Environment) -> None:
    for path in get_prelude_files():
        logger.debug("Loading prelude %s", path)
        eval_source(path.read_text(encoding="utf-8"), env)


def make_root_environment(out: Optional[IO[str]] = None) -> Environment:
    """Build a fresh root environment: native builtins, then the prelude."""
    limit = get_recursion_limit()
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)
    env = Environment()
    register(env, out)
    load_prelude(env)
    logger.debug("Root environment ready with %d bindings", len(env.vars))
    return env


class Interpreter:
    """
    Holds one root environment and evaluates source text against it.
    Definitions persist between calls.
    """
    def __init__(self, out: Optional[IO[str]] = None):
        self.env = make_root_environment(out)

    def eval(self, code: str) -> LispValue:
        """Evaluate all forms in `code`; return the last result (nil if none)."""
        return eval_source(code, self.env)

    def rep(self, code: str) -> str:
        """Read, evaluate and print: the readable rendering of `eval(code)`."""
        return render(self.eval(code), readable=True)

    def load(self, path: str | Path) -> LispValue:
        """Evaluate a source file through the in-language load-file."""
        return evaluate([Symbol("load-file"), str(path)], self.env)
