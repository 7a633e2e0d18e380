from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeArityError
from minischeme.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise SchemeArityError(
            f"if requires a condition, a then-expression and an optional else-expression, given {len(tail)} arguments"
        )

    cond = evaluate_fn(tail[0], env)
    # Only false is false; 0, "" and () all count as true
    if cond is not False:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return False  # no else branch
