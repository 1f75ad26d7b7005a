from mal import SExpression
from mal.types.environment import Environment


class TailCall:
    """Continuation marker: evaluate `ast` in `env` instead of returning a value."""

    __slots__ = ("ast", "env")

    def __init__(self, ast: SExpression, env: Environment):
        self.ast = ast
        self.env = env

    def __repr__(self):
        return f"TailCall({self.ast!r})"
