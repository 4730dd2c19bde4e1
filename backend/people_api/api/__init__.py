"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly from a route table (no auto-discovery)
    - All endpoints return structured JSON responses (204 excepted)

Design Decisions:
    - Thin routes delegate to services and only translate outcomes to HTTP
"""
