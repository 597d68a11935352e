"""Database Definitions — declarative Base, schema bootstrap and SQL statements.

Invariants:
    - Table metadata lives on Base (db/base.py), populated by importing models
    - Statements (db/statements.py) are the only SQL the controllers issue

Design Decisions:
    - aiosqlite driver by default (ADR: single-file store, no server to run);
      any SQLAlchemy async URL works through DATABASE_URL
"""
