"""Runtime environment for mal.

The Environment stores bindings of Symbols to evaluated values and supports
nested lexical scopes via an `outer` link. Closures keep a reference to the
Environment they were created in, so a frame lives as long as its longest
holder.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from mal import LispValue
from mal.errors import MalTypeError, MalUnboundSymbol
from mal.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only, replacing any old binding.

        Raises MalTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MalTypeError(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises MalUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise MalUnboundSymbol(f"'{name}' not found")
        return env.vars[name]

    def child(self) -> Environment:
        """Create an empty scope whose parent is this environment."""
        return Environment(outer=self)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, symbol: Symbol) -> bool:
        return self.find(symbol) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for the parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Whole chain, innermost first; the root frame is summarized."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                if env.outer is None and env is not self:
                    chain.append(f"<root {len(env.vars)} bindings>")
                else:
                    frame = StringIO()
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
