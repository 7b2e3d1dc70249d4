"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Images returned as raw bytes with their media type; errors as plain text

Design Decisions:
    - Thin routes delegate to services
"""
