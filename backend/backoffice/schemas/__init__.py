"""Pydantic Schemas — typed request bodies and response objects per resource.

Invariants:
    - Input models accept only declared fields; anything else (including a
      client-echoed "id") is dropped
    - Output models serialize with camelCase keys

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
