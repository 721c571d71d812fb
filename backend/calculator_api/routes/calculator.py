"""
Calculator API — Calculation Routes (Request Pipeline)
========================================================

What:  POST /v1/{add,subtract,multiply,divide,power,sqrt,percentage}.
How:   Every route runs the same three steps:
           decode   the raw body is parsed as JSON into Binary/UnaryOperands,
                    whatever its Content-Type
           compute  operands are converted to floats and the operation runs
           encode   the float is written as {"result": n}
       Any failure raises; the handlers registered in main.py turn it into
       {"error": message} with HTTP 400.
Who:   Mounted by main.create_app().

Route Inventory (built from services.calculator.OPERATIONS):
    add, subtract, multiply     {"a", "b"}   never fail
    divide, power, percentage   {"a", "b"}   may fail with a domain error
    sqrt                        {"a"}        may fail with a domain error

Because domain errors are exceptions, the operations that never fail plug
into the same handler shape as the ones that do; there is one encode path.
"""

import logging
import math
from typing import Any, Callable, Dict, Type, TypeVar

from fastapi import APIRouter, Request
from pydantic import BaseModel

from calculator_api.exceptions import UnrepresentableResultError
from calculator_api.responses import ResultResponse
from calculator_api.schemas.calculator import (
    BinaryOperands,
    CalculationResult,
    ErrorResponse,
    UnaryOperands,
)
from calculator_api.services.calculator import OPERATIONS, Operation

logger = logging.getLogger(__name__)

BinaryOp = Callable[[float, float], float]
UnaryOp = Callable[[float], float]
Endpoint = Callable[..., Any]
ModelT = TypeVar("ModelT", bound=BaseModel)


def encode_result(value: float) -> ResultResponse:
    """
    Wrap a computed value in the success envelope.

    Raises:
        UnrepresentableResultError: value overflowed to ±inf (or is NaN).
    """
    if not math.isfinite(value):
        raise UnrepresentableResultError(context={"value": repr(value)})
    return ResultResponse(value)


def decode_body(model: Type[ModelT], body: bytes) -> ModelT:
    """
    Parse the raw request body as JSON into `model`.

    The Content-Type header is not consulted: `text/plain`, form-encoded or
    unlabelled bodies are decoded exactly like `application/json` ones.

    Raises:
        pydantic.ValidationError: malformed JSON, a missing field or a
            non-numeric operand.
    """
    return model.model_validate_json(body)


def binary_handler(op: BinaryOp) -> Endpoint:
    """Build an endpoint that decodes {"a", "b"}, applies op, and encodes the result."""

    async def endpoint(request: Request) -> ResultResponse:
        operands = decode_body(BinaryOperands, await request.body())
        a, b = operands.as_floats()
        result = op(a, b)
        logger.debug("%s(%r, %r) = %r", getattr(op, "__name__", "op"), a, b, result)
        return encode_result(result)

    return endpoint


def unary_handler(op: UnaryOp) -> Endpoint:
    """Build an endpoint that decodes {"a"}, applies op, and encodes the result."""

    async def endpoint(request: Request) -> ResultResponse:
        operands = decode_body(UnaryOperands, await request.body())
        a = operands.as_float()
        result = op(a)
        logger.debug("%s(%r) = %r", getattr(op, "__name__", "op"), a, result)
        return encode_result(result)

    return endpoint


def _request_body(model: Type[BaseModel]) -> Dict[str, Any]:
    # The body is read by hand, so FastAPI cannot infer it for the docs
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


def _documented_responses(operation: Operation) -> Dict[int, Dict[str, Any]]:
    if operation.fallible:
        description = "Invalid input or domain error"
    else:
        description = "Invalid input"
    return {
        200: {"description": "Computation succeeded", "model": CalculationResult},
        400: {"description": description, "model": ErrorResponse},
    }


def build_router() -> APIRouter:
    """Create the /v1 router with one POST route per catalogued operation."""
    router = APIRouter(prefix="/v1", tags=["Calculator"])
    for operation in OPERATIONS:
        if operation.arity == 1:
            endpoint = unary_handler(operation.func)
            body_model = UnaryOperands
        else:
            endpoint = binary_handler(operation.func)
            body_model = BinaryOperands
        router.add_api_route(
            f"/{operation.name}",
            endpoint,
            methods=["POST"],
            response_model=CalculationResult,
            responses=_documented_responses(operation),
            summary=operation.summary,
            name=operation.name,
            operation_id=operation.name,
            openapi_extra=_request_body(body_model),
        )
    return router


router = build_router()
