"""
Calculator API — Request Logging Middleware
=============================================

What:  One access-log line for every HTTP request.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client address.
When:  Inside RequestIDMiddleware, so the request ID is already set.

Log line:
    POST /v1/divide -> 400 (0.8ms) [a1b2c3d4] from 127.0.0.1

Level policy:
    5xx  → ERROR
    else → INFO   (a rejected calculation is a normal outcome of the contract)

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from calculator_api.middleware.request_id import request_id_var

logger = logging.getLogger("calculator_api.access")

ACCESS_LINE = "%s %s -> %d (%.1fms) [%s] from %s"


def level_for(status: int) -> int:
    return logging.ERROR if status >= 500 else logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request, except for paths in EXCLUDED_PATHS."""

    # Probes run every few seconds and would drown the useful lines
    EXCLUDED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        fields = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": round(elapsed_ms, 2),
            "client_ip": request.client.host if request.client else "unknown",
        }
        logger.log(
            level_for(response.status_code),
            ACCESS_LINE,
            fields["method"],
            fields["path"],
            fields["status"],
            elapsed_ms,
            fields["request_id"],
            fields["client_ip"],
            extra=fields,
        )
        return response
