"""Boundary Protocols — contract between the request pipeline and the relational store.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - Statements are named-parameter SQL; params are Parameter Store entries
    - get() returns one row or None, all() returns a possibly empty list,
      run() returns the generated id (inserts) and affected row count
    - Store failures surface as PersistenceError, never as driver exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests substitute spies and
      in-memory fakes without inheritance
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

Row = dict[str, Any]


@dataclass(frozen=True)
class RunResult:
    """Outcome of an insert/update/delete."""
    last_id: int | None = None
    changes: int = 0


class PersistenceGateway(Protocol):
    """Contract for statement execution — implemented by infrastructure."""
    async def get(
        self, statement: str, params: Mapping[str, Any] | None = None,
    ) -> Row | None: ...
    async def all(
        self, statement: str, params: Mapping[str, Any] | None = None,
    ) -> list[Row]: ...
    async def run(
        self, statement: str, params: Mapping[str, Any] | None = None,
    ) -> RunResult: ...
