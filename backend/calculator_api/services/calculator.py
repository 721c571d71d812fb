"""
Calculator API — Arithmetic Engine
====================================

What:  The seven arithmetic operations and the fixed catalogue describing them.
How:   Plain functions over floats. Operations that can receive invalid input
       raise a DomainError subclass; the others never raise.
Who:   Called by the request pipeline (routes/calculator.py) through OPERATIONS.

Operation shapes:
    add, subtract, multiply      binary, never fail (overflow → ±inf, not guarded)
    divide, power, percentage    binary, may fail
    sqrt                         unary, may fail

Every function is deterministic and side-effect free, so concurrent requests
can call them without any locking.
"""

import math
from dataclasses import dataclass
from typing import Callable, Tuple

from calculator_api.exceptions import (
    DivisionByZeroError,
    InvalidDomainError,
    NegativePercentageError,
)


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """Raises DivisionByZeroError when b is exactly zero (no epsilon)."""
    if b == 0:
        raise DivisionByZeroError(context={"a": a, "b": b})
    return a / b


def power(a: float, b: float) -> float:
    """
    Real exponentiation a ** b.

    math.pow signals a non-real result (negative base with a fractional
    exponent, zero to a negative power) with ValueError rather than NaN;
    both are reported as InvalidDomainError. Overflow returns a signed
    infinity like the other binary operations instead of raising.

    So power(0, -1) answers "domain error", never "result is not a finite
    number" as an IEEE pole at zero would.
    """
    try:
        result = math.pow(a, b)
    except ValueError:
        raise InvalidDomainError(context={"a": a, "b": b}) from None
    except OverflowError:
        negative = a < 0 and float(b).is_integer() and b % 2 == 1
        return -math.inf if negative else math.inf
    if math.isnan(result):
        raise InvalidDomainError(context={"a": a, "b": b})
    return result


def sqrt(a: float) -> float:
    """Raises InvalidDomainError when a < 0."""
    if a < 0:
        raise InvalidDomainError(context={"a": a})
    return math.sqrt(a)


def percentage(a: float, b: float) -> float:
    """
    `a` percent of `b`, i.e. (a / 100) * b.

    Only the percentage itself is validated: a < 0 raises
    NegativePercentageError, while b may be negative or zero.
    """
    if a < 0:
        raise NegativePercentageError(context={"a": a, "b": b})
    return (a / 100) * b


# ══════════════════════════════════════════════════════════════════════════
# Operation Catalogue
# ══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Operation:
    """
    One named arithmetic operation as exposed over HTTP.

    Attributes:
        name:     Route segment under /v1 (e.g. "divide")
        func:     The engine function
        arity:    1 (operand `a`) or 2 (operands `a` and `b`)
        fallible: Whether func can raise a DomainError. Only the documented
                  400 description depends on it; every operation goes
                  through the same handler either way.
        summary:  One-line description for the API docs
    """

    name: str
    func: Callable[..., float]
    arity: int
    fallible: bool
    summary: str


OPERATIONS: Tuple[Operation, ...] = (
    Operation("add", add, 2, False, "Add two numbers"),
    Operation("subtract", subtract, 2, False, "Subtract two numbers"),
    Operation("multiply", multiply, 2, False, "Multiply two numbers"),
    Operation("divide", divide, 2, True, "Divide two numbers"),
    Operation("power", power, 2, True, "Power operation"),
    Operation("sqrt", sqrt, 1, True, "Square root"),
    Operation("percentage", percentage, 2, True, "Percentage calculation"),
)
