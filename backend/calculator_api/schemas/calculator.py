"""
Calculator API — Pydantic Request/Response Schemas
====================================================

What:  Pydantic models defining the wire contract of the /v1 routes.
How:   The request pipeline parses raw bodies into BinaryOperands/UnaryOperands
       with model_validate_json; FastAPI builds the OpenAPI docs from them.
Who:   Used by the request pipeline (routes/calculator.py) and health route.

Operand encoding:
    An operand is either a JSON number (`12.3`) or a JSON string holding a
    number in JSON number syntax (`"98765432109876543210"`). Strings let
    clients send more digits than a float can hold; the value is still
    collapsed to a float before computing, so the extra precision is lost.
"""

import math
import re
from typing import Tuple, Union

from pydantic import BaseModel, Field, field_validator

from calculator_api.exceptions import InputError

# JSON number grammar (RFC 8259 §6): no leading '+', no leading zeros,
# no bare '.5' or '5.', no whitespace, no NaN/Infinity.
NUMBER_PATTERN = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")

Operand = Union[int, float, str]


def check_operand(value: object) -> object:
    """
    Validate the JSON type and, for strings, the number syntax of an operand.

    Raises:
        ValueError: Reported by pydantic as a field error (HTTP 400).
    """
    # bool is a subclass of int; JSON true/false are not numbers
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError("must be a number or a numeric string")
    if isinstance(value, str) and not NUMBER_PATTERN.fullmatch(value):
        raise ValueError("must be a number or a numeric string")
    return value


def to_float(value: Operand, field: str = "operand") -> float:
    """
    Convert a decoded operand to a finite float.

    Args:
        value: An int, float or numeric string accepted by check_operand.
        field: Operand name, attached to the error for logging.

    Returns:
        The nearest float. Digits beyond float precision are dropped.

    Raises:
        InputError: The value is out of float range (`"1e999"`, a huge
            integer) or is NaN/Infinity, which Python's JSON decoder
            accepts as bare literals.
    """
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise InputError(f"{field}: value out of range", field=field) from None
    if not math.isfinite(number):
        raise InputError(f"{field}: value out of range", field=field)
    return number


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BinaryOperands(BaseModel):
    """Request body for two-operand routes: add, subtract, multiply, divide, power, percentage."""

    a: Operand = Field(description="First operand (number or numeric string)", examples=[12.3])
    b: Operand = Field(description="Second operand (number or numeric string)", examples=[4.5])

    @field_validator("a", "b", mode="before")
    @classmethod
    def validate_operand(cls, v: object) -> object:
        return check_operand(v)

    def as_floats(self) -> Tuple[float, float]:
        return to_float(self.a, "a"), to_float(self.b, "b")


class UnaryOperands(BaseModel):
    """Request body for one-operand routes: sqrt."""

    a: Operand = Field(description="Operand (number or numeric string)", examples=[6.7])

    @field_validator("a", mode="before")
    @classmethod
    def validate_operand(cls, v: object) -> object:
        return check_operand(v)

    def as_float(self) -> float:
        return to_float(self.a, "a")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — documentation of what the API returns
# ══════════════════════════════════════════════════════════════════════════


class CalculationResult(BaseModel):
    """
    Success envelope.

    Only used for the OpenAPI schema: the pipeline writes the body itself
    through responses.ResultResponse so the number keeps its shortest
    round-trip positional form (`5`, not `5.0`).
    """

    result: float = Field(description="Computed value", examples=[8.9])


class ErrorResponse(BaseModel):
    """
    Error envelope, identical for every failure cause.

    Example:
        {"error": "division by zero"}
    """

    error: str = Field(description="Human-readable error message", examples=["invalid input"])


class HealthResponse(BaseModel):
    status: str = Field(description="Always 'healthy' while the process serves requests")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since the process started")
