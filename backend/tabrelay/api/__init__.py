"""API Layer — FastAPI routes, CORS middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is JSON except the empty OPTIONS short-circuit
"""
