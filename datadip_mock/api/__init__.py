"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Successful replies are JSON; failures are plain text

Design Decisions:
    - Thin routes delegate to services for the canned payloads
"""
