"""Numeric semantics of the binary operators ``+ - * / < > = !=``.

Integers are signed 64-bit: integer results outside that range raise
SchemeOverflowError instead of growing or wrapping. A float on either side
promotes both operands to float.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from minischeme import LispValue
from minischeme.errors import (
    SchemeOverflowError,
    SchemeTypeError,
    SchemeZeroDivisionError,
)
from minischeme.printer import render

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_i64(value: int) -> int:
    if not I64_MIN <= value <= I64_MAX:
        raise SchemeOverflowError("Integer overflow")
    return value


def int_div(left: int, right: int) -> int:
    """Integer division truncating toward zero."""
    if right == 0:
        raise SchemeZeroDivisionError("Division by zero")
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return check_i64(quotient)


def float_div(left: float, right: float) -> float:
    """IEEE-754 division: dividing by zero gives a signed infinity or NaN."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


# op -> (integer implementation, float implementation)
ARITHMETIC: dict[str, tuple[Callable[[int, int], int], Callable[[float, float], float]]] = {
    "+": (lambda l, r: check_i64(l + r), operator.add),
    "-": (lambda l, r: check_i64(l - r), operator.sub),
    "*": (lambda l, r: check_i64(l * r), operator.mul),
    "/": (int_div, float_div),
}

COMPARISON: dict[str, Callable[[LispValue, LispValue], bool]] = {
    "<": operator.lt,
    ">": operator.gt,
    "=": operator.eq,
    "!=": operator.ne,
}

OPERATORS: tuple[str, ...] = (*ARITHMETIC, *COMPARISON)


def binary_operation(op: str, left: LispValue, right: LispValue) -> LispValue:
    """Apply `op` to two already-evaluated operands."""
    if not (is_number(left) and is_number(right)):
        raise SchemeTypeError(
            "Unable to apply binary operation on non-numeric values: "
            f"({op} {render(left)} {render(right)})"
        )
    both_int = isinstance(left, int) and isinstance(right, int)
    if not both_int:
        left, right = float(left), float(right)

    if op in COMPARISON:
        return COMPARISON[op](left, right)
    int_fn, float_fn = ARITHMETIC[op]
    return int_fn(left, right) if both_int else float_fn(left, right)
