"""Special forms for the primitive binary operators.

Each operator is its own special form: ``(op left right)`` with exactly two
operands, evaluated left before right.
"""

from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeArityError
from minischeme.evaluation.numeric import binary_operation
from minischeme.types.environment import Environment


def binary_operator_form(op: str):
    def operator_form(
        tail: list[SExpression],
        env: Environment,
        evaluate_fn: EvaluatorFn,
    ) -> LispValue:
        if len(tail) != 2:
            raise SchemeArityError(f"{op} requires exactly 2 operands, given {len(tail)}")
        left = evaluate_fn(tail[0], env)
        right = evaluate_fn(tail[1], env)
        return binary_operation(op, left, right)

    operator_form.__name__ = f"operator_form[{op}]"
    return operator_form
