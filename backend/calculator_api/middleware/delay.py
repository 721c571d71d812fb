"""
Calculator API — Artificial Delay Middleware
==============================================

What:  Sleeps a random 0..N-1 milliseconds before passing each request on.
How:   asyncio.sleep, so other requests keep being served meanwhile.
When:  Installed by create_app() only when ARTIFICIAL_DELAY_MS > 0. Used to
       make loading states visible while developing the frontend.
"""

import asyncio
import logging
import random

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class ArtificialDelayMiddleware(BaseHTTPMiddleware):
    """Delays every request by a uniformly random number of milliseconds below max_delay_ms."""

    def __init__(self, app: ASGIApp, max_delay_ms: int) -> None:
        super().__init__(app)
        if max_delay_ms <= 0:
            raise ValueError("max_delay_ms must be positive")
        self.max_delay_ms = max_delay_ms

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        delay_ms = random.randrange(self.max_delay_ms)
        logger.debug("Delaying %s %s by %dms", request.method, request.url.path, delay_ms)
        await asyncio.sleep(delay_ms / 1000)
        return await call_next(request)
