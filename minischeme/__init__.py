# Core type aliases for minischeme's data model.
# Plain Python types (int, float, bool, str, list) represent both parsed forms
# and runtime values. Symbol and Lambda are the only dedicated classes.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function passed to special forms: (expr, env) -> value
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
