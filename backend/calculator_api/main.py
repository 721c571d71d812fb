"""
Calculator API — FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn calculator_api.main:app) and by run().
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌────────┐ ┌───────────┐  │
    │  │  Req ID  │→│ Logging │→│  CORS* │→│  Delay*   │  │
    │  └──────────┘ └─────────┘ └────────┘ └───────────┘  │
    │                              (* only when enabled)  │
    │  Routes:                                            │
    │  ┌──────────────────────────┐ ┌──────────────────┐  │
    │  │ POST /v1/<operation> × 7 │ │ GET /health      │  │
    │  └──────────────────────────┘ └──────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ bad body→400 │ CalculatorError→400 │ 405→404  │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional, Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from calculator_api import __version__
from calculator_api.config import Settings, settings
from calculator_api.exceptions import CalculatorError
from calculator_api.middleware.delay import ArtificialDelayMiddleware
from calculator_api.middleware.logging import RequestLoggingMiddleware
from calculator_api.middleware.request_id import RequestIDMiddleware, request_id_var
from calculator_api.responses import error_response
from calculator_api.routes import calculator, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Log startup and shutdown.

    The service holds no resources (no pools, no files, no caches), so there
    is nothing to open or release around the serving period.
    """
    config: Settings = app.state.settings
    setup_logging(config.log_level)
    logger.info("Calculator API %s starting up...", __version__)
    features = config.enabled_features()
    logger.info("Optional features: %s", ", ".join(features) if features else "none")
    if config.enable_swagger:
        logger.info("Swagger UI: http://%s:%d/swagger", config.host, config.port)

    yield

    logger.info("Calculator API shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def describe_validation_error(exc: Union[ValidationError, RequestValidationError]) -> str:
    """
    Collapse a list of body errors into one human-readable message.

        {"b": 3}             → "a: Field required"
        {"a": "foo", "b": 3} → "a: must be a number or a numeric string"
        {invalid}            → "invalid JSON body"
    """
    parts = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            return "invalid JSON body"
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        msg = str(error.get("msg", "invalid value"))
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else f"request body: {msg}")
    return "; ".join(parts) or "invalid request body"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for the uniform error envelope.

    Handler hierarchy:
        ValidationError        → 400 (body could not be decoded)
        RequestValidationError → 400 (same, for FastAPI-validated params)
        CalculatorError        → 400 (operand conversion, domain, overflow)
        HTTPException          → its own status; 405 is reported as 404
        Exception (fallback)   → 500

    Every body is {"error": "<message>"}.
    """

    @app.exception_handler(ValidationError)
    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: Union[ValidationError, RequestValidationError]
    ):
        message = describe_validation_error(exc)
        logger.debug("[%s] Rejected body on %s: %s", request_id_var.get(""), request.url.path, message)
        return error_response(message)

    @app.exception_handler(CalculatorError)
    async def handle_calculator_error(request: Request, exc: CalculatorError):
        logger.debug(
            "[%s] %s on %s: %s | Context: %s",
            request_id_var.get(""),
            type(exc).__name__,
            request.url.path,
            exc.message,
            exc.context,
        )
        return error_response(exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # Routes are only reachable by their declared method; any other
        # method on a known path looks the same as an unknown path.
        if exc.status_code == 405:
            return error_response("Not Found", status_code=404)
        return error_response(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(status_code=500, content={"error": "internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to build the app from. Defaults to the module-level
                `settings` singleton; tests pass their own to flip toggles.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    config = config or settings

    swagger = config.enable_swagger
    app = FastAPI(
        title="Calculator API",
        description="A REST API service that provides calculator operations",
        version=__version__,
        docs_url="/swagger" if swagger else None,
        redoc_url=None,
        openapi_url="/openapi.json" if swagger else None,
        lifespan=lifespan,
    )
    app.state.settings = config

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition: the last added runs first.
    if config.artificial_delay_ms > 0:
        app.add_middleware(ArtificialDelayMiddleware, max_delay_ms=config.artificial_delay_ms)

    if config.allow_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["POST", "OPTIONS"],
            allow_headers=["Content-Type"],
            expose_headers=["X-Request-ID"],
        )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(calculator.router)
    app.include_router(health.router)

    return app


# uvicorn expects `calculator_api.main:app` to be importable
app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn on HOST:PORT."""
    import uvicorn

    setup_logging(settings.log_level)
    logger.info("Server starting on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
