from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeArityError, SchemeFormError
from minischeme.printer import render
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current scope only, shadowing any outer binding. Evaluates to true.
    """
    if len(tail) != 2:
        raise SchemeArityError(f"define requires exactly 2 arguments, given {len(tail)}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SchemeFormError(f"define requires a symbol as its first argument, found {render(name)}")
    value = evaluate_fn(val_expr, env)
    env.set(name, value)
    return True
