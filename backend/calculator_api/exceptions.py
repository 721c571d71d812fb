"""
Calculator API — Custom Exception Hierarchy
=============================================

What:  Defines application-specific exceptions for every way a calculation
       request can be rejected.
How:   Each exception class carries a fixed message and an optional context
       dict. The global handler registered in main.py catches them and
       returns the uniform error envelope `{"error": message}` with HTTP 400.
Who:   Raised by the arithmetic engine and the request pipeline.
When:  During request processing; never fatal to the serving process.

Exception Hierarchy:
    CalculatorError (base)
    ├── InputError                  → 400 (operand not convertible to a finite float)
    ├── DomainError                 → 400 (base for arithmetic domain errors)
    │   ├── DivisionByZeroError
    │   ├── InvalidDomainError      (negative sqrt AND non-real power result)
    │   └── NegativePercentageError
    └── UnrepresentableResultError  → 400 (result is ±inf or NaN)

Domain error messages are fixed strings; operands are never interpolated
into them. Operands may still be attached as `context` for debug logging.
"""

from typing import Any, Dict, Optional


class CalculatorError(Exception):
    """
    Base exception for all Calculator API errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged at DEBUG, NOT returned to client)
    """

    default_message = "calculation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class InputError(CalculatorError):
    """
    Raised when a decoded operand cannot be converted to a finite float.

    When:    `"1e999"`, a 400-digit integer, or a NaN/Infinity literal.
    HTTP:    400 Bad Request

    Decoding failures (malformed JSON, missing field, non-numeric string)
    surface earlier as pydantic's ValidationError; both end up in the same
    envelope.
    """

    default_message = "invalid operand"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DomainError(CalculatorError):
    """Base for errors raised by the engine on mathematically invalid input."""

    default_message = "domain error"


class DivisionByZeroError(DomainError):
    """divide(a, b) with b exactly zero."""

    default_message = "division by zero"


class InvalidDomainError(DomainError):
    """
    Result is not a real number.

    Covers both sqrt of a negative number and a power whose real-valued
    result is undefined (negative base with fractional exponent, zero to a
    negative power). Callers see one message for both cases.
    """

    default_message = "domain error"


class NegativePercentageError(DomainError):
    """percentage(a, b) with a negative percentage `a`. The base `b` may be anything."""

    default_message = "negative percentage"


class UnrepresentableResultError(CalculatorError):
    """
    Raised by the pipeline when an operation overflows to infinity.

    JSON has no literal for ±inf or NaN, so such a value can never be
    returned as a successful result.
    """

    default_message = "result is not a finite number"
