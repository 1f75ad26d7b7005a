"""
  Tokenizer: source text -> ordered list of token strings.

Never raises; malformed tokens (an unterminated string, a stray ')') are left
for the reader to reject.
"""

from __future__ import annotations

import re

TOKEN_RE = re.compile(
    r"[\s,]*("
    r"(?P<splice>~@)"  # splice marker
    r"|(?P<special>[\[\]{}()'`~^@])"  # single structural characters
    r'|(?P<string>"(?:\\.|[^\\"])*"?)'  # strings, possibly unterminated
    r"|(?P<comment>;[^\n]*)"  # line comment
    r'|(?P<atom>[^\s\[\]{}(\'"`,;)]+)'  # numbers, symbols, literals
    r")",
    re.DOTALL,
)


def tokenize(source: str) -> list[str]:
    """Split `source` into tokens, dropping whitespace, commas and comments."""
    tokens: list[str] = []
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.end() == pos:
            break
        pos = m.end()
        if m.group("comment"):
            continue
        tokens.append(m.group(1))
    return tokens
