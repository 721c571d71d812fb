# Routes package init
"""
Calculator API — Routes Package
=================================

Route Inventory:
    - calculator.py:  POST /v1/{add,subtract,multiply,divide,power,sqrt,percentage}
    - health.py:      GET  /health

Routes handle HTTP concerns only (decode the body, encode the envelope);
the arithmetic lives in services.calculator.
"""
