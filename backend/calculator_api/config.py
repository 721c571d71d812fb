"""
Calculator API — Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py (app factory, entry point) and the test suite.
When:  Loaded once at module import time; an invalid value (PORT=abc)
       raises pydantic.ValidationError before the server starts.

Environment Variables:
    HOST                 interface to bind            (default: 0.0.0.0)
    PORT                 port to listen on            (default: 3001)
    ALLOW_CORS           enable CORS headers          (default: false)
    ENABLE_SWAGGER       serve API docs at /swagger   (default: false)
    ARTIFICIAL_DELAY_MS  random 0..N ms request delay (default: 0, disabled)
    LOG_LEVEL            root logging level           (default: INFO)
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development; every
    optional feature (CORS, Swagger, artificial delay) is off unless enabled.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)

    # ── Optional Features ─────────────────────────────────────────────────
    # What: Adds permissive cross-origin headers (any origin, POST/OPTIONS)
    # Needed when the frontend is served from a different origin in development
    allow_cors: bool = Field(default=False)

    # What: Serves Swagger UI at /swagger and the schema at /openapi.json
    enable_swagger: bool = Field(default=False)

    # What: Upper bound (exclusive) of a random per-request delay in milliseconds
    # Used to exercise loading states in the frontend; 0 disables the middleware
    artificial_delay_ms: int = Field(default=0, ge=0, le=60_000)

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "extra": "ignore",
    }

    def enabled_features(self) -> List[str]:
        """Names of the optional features switched on, for the startup log."""
        features = []
        if self.allow_cors:
            features.append("cors")
        if self.enable_swagger:
            features.append("swagger")
        if self.artificial_delay_ms > 0:
            features.append(f"delay<{self.artificial_delay_ms}ms")
        return features


# Singleton instance — imported throughout the application
settings = Settings()
