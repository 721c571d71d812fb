# Middleware package init
"""
Calculator API — Middleware Package
=====================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS*] → [Delay*] → Route Handler

    * installed only when ALLOW_CORS / ARTIFICIAL_DELAY_MS are set

    1. Request ID first, so every later log line carries the ID
    2. Logging measures the full duration, including any artificial delay
    3. CORS answers preflight OPTIONS before routing

Middleware only observes requests and responses; none of it touches the
calculation itself.
"""
