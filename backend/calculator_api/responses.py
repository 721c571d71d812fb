"""
Calculator API — Envelope Responses
=====================================

What:  Starlette responses for the success and error envelopes.
How:   ResultResponse writes `{"result":<number>}` itself instead of going
       through json.dumps, which would print 5.0 as `5.0` and 1e21 as `1e+21`.
       The number is rendered with the shortest digits that round-trip to
       the same float, in positional notation.
"""

import math
from decimal import Decimal
from typing import Mapping, Optional

from starlette.responses import JSONResponse, Response


def format_number(value: float) -> str:
    """
    Shortest round-trip decimal text for a finite float, without exponent.

        5.0                  → "5"
        0.1 + 0.2            → "0.30000000000000004"
        1e-07                → "0.0000001"
        3.292181070329218e19 → "32921810703292180000"

    repr() already yields the shortest round-trip digits; Decimal only
    re-lays them out positionally and drops the trailing ".0".

    Raises:
        ValueError: value is infinite or NaN (not representable in JSON).
    """
    if not math.isfinite(value):
        raise ValueError(f"cannot encode non-finite number {value!r}")
    return format(Decimal(repr(float(value))).normalize(), "f")


class ResultResponse(Response):
    """Success envelope: HTTP 200 with `{"result":<number>}`."""

    media_type = "application/json"

    def __init__(
        self,
        result: float,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(content=result, status_code=status_code, headers=headers)

    def render(self, content: float) -> bytes:
        return b'{"result":' + format_number(content).encode("ascii") + b"}"


def error_response(
    message: str,
    status_code: int = 400,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Error envelope: `{"error": message}`."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)
