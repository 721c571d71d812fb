"""
Calculator API — Application Package Initializer
=================================================

What:  Marks the `calculator_api` directory as a Python package.
Who:   Used by uvicorn (`calculator_api.main:app`), pytest, and the console script.

Architecture Note:
    The service follows the same layered shape for every request:

    ┌─────────────────────────────────────┐
    │        Middleware (ID, logging)     │  ← cross-cutting, observes only
    ├─────────────────────────────────────┤
    │      Routes (Request Pipeline)      │  ← decode → compute → encode
    ├─────────────────────────────────────┤
    │      Schemas (Operands, Envelopes)  │  ← Pydantic wire contracts
    ├─────────────────────────────────────┤
    │     Services (Arithmetic Engine)    │  ← pure functions, no HTTP
    └─────────────────────────────────────┘

    Nothing below the routes knows about HTTP, and nothing holds state
    between requests.
"""

__version__ = "1.0.0"
