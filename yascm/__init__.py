# Core type aliases for the yascm data model.
# Runtime values are plain Python objects (int, float, str) plus the small set of
# classes in yascm.types (Pair, Symbol, Character, Closure, ...).
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; forms and values share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed into special forms so they control evaluation
EvaluatorFn = Callable[..., LispValue]
