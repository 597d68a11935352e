"""SQL Gateway — PersistenceGateway implementation over an SQLAlchemy AsyncSession.

Invariants:
    - "$"-marked Parameter Store keys are bound as plain named parameters
    - Keys a statement does not reference are ignored
    - run() commits; get()/all() never write
    - All SQLAlchemy exceptions and driver bind overflows are mapped to
      PersistenceError (IntegrityViolationError for constraint failures) after
      rolling the session back

Design Decisions:
    - text() statements over ORM queries: the pipeline owns parameter accumulation,
      so statements are plain named-parameter SQL (ADR: one gateway, three verbs)
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Result
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.errors import IntegrityViolationError, PersistenceError
from backoffice.core.parameter_store import PARAM_PREFIX
from backoffice.core.repository_protocols import Row, RunResult

logger = logging.getLogger(__name__)


def bind_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Translate Parameter Store entries into SQLAlchemy bind parameters."""
    return {
        key.removeprefix(PARAM_PREFIX): value
        for key, value in (params or {}).items()
    }


class SqlGateway:
    """Executes named-parameter SQL on one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get(
        self, statement: str, params: Mapping[str, Any] | None = None,
    ) -> Row | None:
        result = await self._execute(statement, params, "get")
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def all(
        self, statement: str, params: Mapping[str, Any] | None = None,
    ) -> list[Row]:
        result = await self._execute(statement, params, "all")
        return [dict(row) for row in result.mappings().all()]

    async def run(
        self, statement: str, params: Mapping[str, Any] | None = None,
    ) -> RunResult:
        result = await self._execute(statement, params, "run")
        last_id = result.scalar_one() if result.returns_rows else None
        changes = result.rowcount if result.rowcount and result.rowcount > 0 else 0
        try:
            await self._db.commit()
        except SQLAlchemyError as e:
            raise await self._translate(e, "commit")
        return RunResult(last_id=last_id, changes=changes)

    async def _execute(
        self, statement: str, params: Mapping[str, Any] | None, operation: str,
    ) -> Result:
        try:
            return await self._db.execute(text(statement), bind_params(params))
        except SQLAlchemyError as e:
            raise await self._translate(e, operation)
        except OverflowError as e:
            # raised by the driver while binding, outside SQLAlchemy's hierarchy
            await self._db.rollback()
            logger.error(f"DB bind error: {e}")
            raise PersistenceError("Parameter out of range for the store", operation)

    async def _translate(
        self, exc: SQLAlchemyError, operation: str,
    ) -> PersistenceError:
        await self._db.rollback()
        if isinstance(exc, IntegrityError):
            logger.error(f"DB integrity error: {exc}")
            return IntegrityViolationError("Integrity constraint violated", operation)
        if isinstance(exc, OperationalError):
            logger.error(f"DB operational error: {exc}")
            return PersistenceError("Connection or operational error", operation)
        if isinstance(exc, DBAPIError):
            logger.error(f"DB driver error: {exc}")
            return PersistenceError("Database driver error", operation)
        logger.error(f"SQLAlchemy error: {exc}")
        return PersistenceError("Database operation failed", operation)
