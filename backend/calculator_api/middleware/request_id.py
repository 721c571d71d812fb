"""
Calculator API — Request ID Middleware
========================================

What:  Assigns a short ID to each incoming request and adds it to the response.
How:   Reuses the client's X-Request-ID header when present, otherwise takes
       the first 8 characters of a uuid4. The ID is stored in a ContextVar
       read by the access log and the exception handlers.
When:  Outermost application middleware, so every log line of a request
       (access log, exception handlers) carries the same ID.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header if present
        2. Otherwise generate a new short UUID
        3. Store in the request_id_var ContextVar
        4. Echo in the X-Request-ID response header
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid
        return response
