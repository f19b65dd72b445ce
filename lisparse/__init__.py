# Core type aliases for the lisparse data model.
# Plain Python types represent both code (forms) and runtime values:
# int, float, list, Symbol, and the Nil/T singletons.
#
# Naming guidance:
# - SExpression: reader/parser code, for syntactic forms not yet evaluated.
# - LispValue:  evaluator/runtime code, for evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms and builtins
EvaluatorFn = Callable[..., LispValue]
