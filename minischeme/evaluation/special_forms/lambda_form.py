from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeArityError, SchemeFormError
from minischeme.printer import render
from minischeme.types.environment import Environment
from minischeme.types.lambda_fn import Lambda
from minischeme.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body expression, itself a list.
    # The body is stored unwrapped and rebuilt on every call.
    if len(tail) != 2:
        raise SchemeArityError(
            f"lambda requires a parameter list and one body expression, given {len(tail)} arguments"
        )

    params, body = tail
    if not isinstance(params, list):
        raise SchemeFormError(f"lambda parameters must be a list, found {render(params)}")
    for param in params:
        if not isinstance(param, Symbol):
            raise SchemeFormError(f"Invalid lambda parameter: {render(param)}")
    if not isinstance(body, list):
        raise SchemeFormError(f"lambda body must be a list expression, found {render(body)}")

    return Lambda(params, body)
