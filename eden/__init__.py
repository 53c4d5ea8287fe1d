# Core type aliases for Eden's data model.
# Runtime values use plain Python types where one fits (int, str, bool, list)
# and small classes in eden.types where none does (Symbol, DottedList,
# Quoted, Closure, Primitive).
#
# Naming guidance:
# - SExpression: Use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; forms and values share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (the reader emits values, so the two are interchangeable)
SExpression = LispValue

# Evaluator function type: passed into special forms and the apply engine
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
