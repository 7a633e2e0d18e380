"""Core tree-walking evaluator for minischeme.

Dispatches on the shape of the expression: atoms evaluate to themselves,
symbols are looked up, lists headed by a special-form symbol go to the
special-form registry, lists headed by any other symbol are procedure
calls, and lists headed by anything else are evaluated element by element.
"""

from __future__ import annotations

from minischeme import SExpression, LispValue
from minischeme.errors import SchemeEvaluationError, SchemeTypeError
from minischeme.evaluation.apply import apply
from minischeme.evaluation.special_forms import SPECIAL_FORMS
from minischeme.types.environment import Environment
from minischeme.types.lambda_fn import Lambda
from minischeme.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expression against `env`, mutating it through `define`."""
    match expr:
        case bool() | int() | float() | str():
            return expr

        case Symbol():
            return env.lookup(expr)

        case Lambda():
            raise SchemeTypeError(f"Cannot evaluate {expr} outside of application position")

        case []:
            raise SchemeEvaluationError("Empty list")

        case [Symbol() as head, *tail_args]:
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                return form(tail_args, env, evaluate)
            return apply(head, tail_args, env, evaluate)

        case list():
            # Plain sequence (this is how a whole program evaluates): every
            # element in order, the first error aborts the rest.
            return [evaluate(item, env) for item in expr]

    raise SchemeTypeError(f"Cannot evaluate {expr!r}")
