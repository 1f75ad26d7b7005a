"""
  Recursive-descent reader

Turns tokens into values; the AST is ordinary mal data:

    - lists   -> Python list
    - numbers -> float
    - strings -> str (escapes decoded)
    - true / false -> bool
    - nil     -> Nil
    - anything else -> Symbol
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from mal import SExpression
from mal.errors import MalSyntaxError, MalUnexpectedEOF, MalEmptyInput, MalRecursionError
from mal.reader.tokenizer import tokenize
from mal.types.nil import Nil
from mal.types.symbol import Symbol

NUMBER_SHAPE_RE = re.compile(r"-?[0-9.]+")
NUMBER_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")
STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"', re.DOTALL)
ESCAPE_RE = re.compile(r'\\(["n\\])')

ESCAPES: dict[str, str] = {
    "\\": "\\",
    "n": "\n",
    '"': '"',
}

LITERALS: dict[str, SExpression] = {
    "true": True,
    "false": False,
    "nil": Nil,
}


def unescape(body: str) -> str:
    """Decode \\\\, \\n and \\" in one left-to-right pass; other pairs stay verbatim."""
    return ESCAPE_RE.sub(lambda m: ESCAPES[m.group(1)], body)


class TokenStream:
    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.position = 0

    def peek(self) -> Optional[str]:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.position += 1
        return tok

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def read_form(self) -> SExpression:
        tok = self.peek()
        if tok is None:
            raise MalUnexpectedEOF("Unexpected EOF while reading form")
        if tok == "(":
            return self.read_list()
        if tok == ")":
            raise MalSyntaxError("Unexpected ')'")
        return self.read_atom()

    def read_list(self) -> list[SExpression]:
        self.advance()  # consume '('
        items: list[SExpression] = []
        while self.peek() != ")":
            if self.at_end:
                raise MalUnexpectedEOF("Unexpected EOF while reading list")
            items.append(self.read_form())
        self.advance()  # consume ')'
        return items

    def read_atom(self) -> SExpression:
        tok = self.advance()
        if NUMBER_SHAPE_RE.fullmatch(tok):
            if not NUMBER_RE.fullmatch(tok):
                raise MalSyntaxError(f"Malformed number: {tok}")
            return float(tok)
        if tok in LITERALS:
            return LITERALS[tok]
        if tok.startswith('"'):
            if not STRING_RE.fullmatch(tok):
                raise MalUnexpectedEOF(f"Unbalanced string: {tok}")
            return unescape(tok[1:-1])
        return Symbol(tok)

    def read_nested(self) -> SExpression:
        """read_form for callers outside the reader; deep nesting becomes a MalError."""
        try:
            return self.read_form()
        except RecursionError as e:
            raise MalRecursionError("Maximum reader nesting depth exceeded") from e

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end:
            yield self.read_nested()


def read_str(source: str) -> SExpression:
    """Read the first form of `source`; trailing tokens are ignored."""
    stream = TokenStream(tokenize(source))
    if stream.at_end:
        raise MalEmptyInput("No form to read")
    return stream.read_nested()


def parse_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level form of `source` in order."""
    return TokenStream(tokenize(source)).parse_all()
