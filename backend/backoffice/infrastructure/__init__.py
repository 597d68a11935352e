"""Infrastructure Layer — database engine, SQL gateway and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver exceptions never escape: they are mapped to PersistenceError

Design Decisions:
    - Thin wrappers over SQLAlchemy so the core sees only PersistenceGateway
"""
