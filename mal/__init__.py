# Core type aliases for the mal data model.
# Runtime values are plain Python objects (float, str, bool, list) plus the
# Symbol, Nil, Closure and NativeFunction types defined in mal.types.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any`; code and data share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (interchangeable with LispValue)
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]
