import sys

import pytest
from hypothesis import given, strategies as st

from minischeme.errors import (
    SchemeArityError,
    SchemeEvaluationError,
    SchemeTypeError,
    SchemeUnboundSymbol,
)
from minischeme.evaluation.evaluator import evaluate
from minischeme.interpreter import Interpreter, evaluate_source
from minischeme.types.environment import Environment
from minischeme.types.lambda_fn import Lambda
from minischeme.types.symbol import Symbol

# -----------------------------------------------------
# Programs
# -----------------------------------------------------

AREA = """(
    (define r 10)
    (define pi 314)
    (* pi (* r r))
)"""

SQR = """(
    (define sqr (lambda (r) (* r r)))
    (sqr 10)
)"""

FACT = """(
    (define fact (lambda (n) (if (< n 1) 1 (* n (fact (- n 1))))))
    (fact 5)
)"""

FIB = """(
    (define fib (lambda (n) (if (< n 2) 1 (+ (fib (- n 1)) (fib (- n 2))))))
    (fib 10)
)"""

CIRCLE_AREA_FN = """(
    (define pi 314)
    (define r 10)
    (define sqr (lambda (r) (* r r)))
    (define area (lambda (r) (* pi (sqr r))))
    (area r)
)"""


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        (AREA, [True, True, 31400]),
        (SQR, [True, 100]),
        (FACT, [True, 120]),
        (FIB, [True, 89]),
        (CIRCLE_AREA_FN, [True, True, True, True, 31400]),
        ("(1 2 3)", [1, 2, 3]),
        ('((+ 1 2) 3.5 "s")', [3, 3.5, "s"]),
        ("((define a 5) a (+ a a))", [True, 5, 10]),
    ],
)
def test_programs(run, source, expected):
    assert run(source) == expected


def test_integer_result_is_not_a_bool(run):
    result = run("(+ 1 0)")
    assert type(result) is int
    assert run("(= 1 1)") is True


# -----------------------------------------------------
# Atoms and symbols
# -----------------------------------------------------

@pytest.mark.parametrize("value", [1, -7, 3.14, True, False, "hello", ""])
def test_self_evaluating_atoms(env, value):
    assert evaluate(value, env) == value


def test_symbol_lookup(env):
    env.set(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42


def test_unbound_symbol(env):
    with pytest.raises(SchemeUnboundSymbol, match="Unbound symbol z"):
        evaluate(Symbol("z"), env)


def test_lambda_is_not_a_term(env):
    with pytest.raises(SchemeTypeError):
        evaluate(Lambda([Symbol("x")], [Symbol("x")]), env)


def test_lambda_bound_to_a_symbol_evaluates_by_lookup(run):
    result = run("((define id (lambda (x) (+ x 0))) id)")
    assert result[0] is True
    assert isinstance(result[1], Lambda)
    assert result[1].formals == [Symbol("x")]


@pytest.mark.parametrize("source", ["()", "(())", "((define x 1) ())"])
def test_empty_list(run, source):
    with pytest.raises(SchemeEvaluationError, match="Empty list"):
        run(source)


# -----------------------------------------------------
# Procedure calls
# -----------------------------------------------------

def test_call_unbound_procedure(run):
    with pytest.raises(SchemeUnboundSymbol, match="Unbound symbol foo"):
        run("(foo 1)")


def test_call_non_function(run):
    with pytest.raises(SchemeTypeError, match="Trying to evaluate non-function expression: x"):
        run("((define x 5) (x 1))")


def test_call_arity_mismatch(run):
    with pytest.raises(SchemeArityError, match="Lambda expects 2 parameters, but was given 1"):
        run("((define f (lambda (a b) (+ a b))) (f 1))")


def test_zero_parameter_lambda(run):
    assert run("((define seven (lambda () (+ 3 4))) (seven))") == [True, 7]


def test_duplicate_parameters_last_wins(run):
    assert run("((define f (lambda (a a) (+ a 0))) (f 1 2))") == [True, 2]


def test_arguments_evaluated_in_caller_scope(run):
    program = """(
        (define x 10)
        (define f (lambda (x y) (+ x y)))
        (f 1 x)
    )"""
    assert run(program) == [True, True, 11]


def test_define_inside_body_shadows_locally(run, env):
    program = """(
        (define x 1)
        (define f (lambda (y) (define x y)))
        (f 99)
        (+ x 0)
    )"""
    assert run(program) == [True, True, True, 1]
    assert env.lookup(Symbol("x")) == 1


def test_activation_records_chain_to_the_caller(run):
    # No scope is captured at definition time: getx sees the caller's x.
    program = """(
        (define x 1)
        (define getx (lambda () (+ x 0)))
        (define shadow (lambda (x) (getx)))
        (getx)
        (shadow 42)
    )"""
    assert run(program) == [True, True, True, 1, 42]


def test_activation_is_not_left_behind(run, env):
    run("((define f (lambda (n) (* n 2))) (f 4))")
    assert Symbol("n") not in env


# -----------------------------------------------------
# Failure semantics
# -----------------------------------------------------

def test_errors_abort_the_sequence_without_rollback(run, env):
    with pytest.raises(SchemeUnboundSymbol):
        run("((define a 1) (undefined 1) (define b 2))")
    assert env.lookup(Symbol("a")) == 1
    assert Symbol("b") not in env


def test_linear_recursion_a_thousand_deep(run):
    program = "((define sum (lambda (n) (if (< n 1) 0 (+ n (sum (- n 1)))))) (sum 1000))"
    assert run(program) == [True, 500500]


def test_interpreter_session_raises_recursion_limit(monkeypatch):
    monkeypatch.setenv("MINISCHEME_RECURSION_LIMIT", "25000")
    monkeypatch.setattr(sys, "getrecursionlimit", lambda: 1000)
    calls = []
    monkeypatch.setattr(sys, "setrecursionlimit", calls.append)
    Interpreter()
    assert calls == [25000]


def test_unbounded_recursion_is_not_caught(run):
    with pytest.raises(RecursionError):
        run("((define loop (lambda (n) (loop n))) (loop 1))")


# -----------------------------------------------------
# Session behaviour
# -----------------------------------------------------

def test_definitions_persist_across_calls(interp):
    assert interp.eval("((define r 10))") == [True]
    assert interp.eval("(* r r)") == 100


@pytest.mark.parametrize("source", [AREA, SQR, FACT, FIB, CIRCLE_AREA_FN])
def test_idempotent_across_fresh_environments(source):
    assert evaluate_source(source, Environment()) == evaluate_source(source, Environment())


@given(st.integers(min_value=0, max_value=12))
def test_factorial_matches_python(n):
    program = f"((define fact (lambda (n) (if (< n 1) 1 (* n (fact (- n 1)))))) (fact {n}))"
    expected = 1
    for i in range(2, n + 1):
        expected *= i
    first = evaluate_source(program, Environment())
    assert first == [True, expected]
    assert evaluate_source(program, Environment()) == first
