"""API Layer — FastAPI routes, middleware, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - All endpoints except the probes return Envelope-shaped JSON
"""
