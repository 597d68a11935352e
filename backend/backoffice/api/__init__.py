"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes hold no business logic: each builds a RequestContext and hands it
      to a resource controller

Design Decisions:
    - Path identifiers are declared as str so malformed values reach the route
      resolver (400) instead of FastAPI's own path validation
"""
