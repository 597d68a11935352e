"""Services Layer — route parameter resolution and the four resource controllers.

Invariants:
    - Every controller operation is one run_pipeline() call over ordered stages
    - Validation and integrity stages always precede mutating stages
    - Controllers reach the store only through the injected PersistenceGateway

Design Decisions:
    - Stage factories (pipeline_stages.py) are shared; controllers only choose
      the order and the statements (ADR: one vocabulary, four resources)
"""
