"""Core Layer — request pipeline primitives, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Stages may be async, but nothing in core performs IO itself

Design Decisions:
    - Functional core separated from imperative shell
"""
