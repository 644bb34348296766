"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Responses are JSON, or empty for 204 and 404

Design Decisions:
    - Thin routes delegate to services
"""
