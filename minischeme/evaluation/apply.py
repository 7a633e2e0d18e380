"""Application of user-defined procedures.

A call ``(name arg ...)`` looks ``name`` up, checks the argument count,
evaluates every argument in the caller's environment (left to right, before
any body code runs), then evaluates the body in a fresh activation record.

The activation record is a child of the *caller's* environment, not of the
environment the lambda was defined in: procedures capture no scope.
"""

from __future__ import annotations

from minischeme import EvaluatorFn, LispValue, SExpression
from minischeme.errors import SchemeArityError, SchemeTypeError
from minischeme.types.environment import Environment
from minischeme.types.lambda_fn import Lambda
from minischeme.types.symbol import Symbol


def apply_lambda(
    fn: Lambda,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate `arg_exprs` in `env`, bind them to `fn`'s formals and run its body."""
    if len(arg_exprs) != fn.arity:
        raise SchemeArityError(
            f"Lambda expects {fn.arity} parameters, but was given {len(arg_exprs)}"
        )
    args = [evaluate_fn(arg, env) for arg in arg_exprs]

    activation = Environment.extend(env)
    # Duplicate formals: the later one wins
    for formal, value in zip(fn.formals, args):
        activation.set(formal, value)
    return evaluate_fn(fn.body_form(), activation)


def apply(
    name: Symbol,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Call the procedure bound to `name`."""
    fn = env.lookup(name)
    if not isinstance(fn, Lambda):
        raise SchemeTypeError(f"Trying to evaluate non-function expression: {name}")
    return apply_lambda(fn, arg_exprs, env, evaluate_fn)
