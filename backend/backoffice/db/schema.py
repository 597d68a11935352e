"""Schema Bootstrap — creates missing tables on startup.

Invariants:
    - Idempotent: create_all only issues CREATE TABLE for absent tables
    - Alembic revisions (alembic/versions) describe the same schema for managed databases
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from backoffice.db.base import Base
import backoffice.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table known to Base.metadata if it does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        f"Schema ready: {', '.join(sorted(Base.metadata.tables))}",
    )


async def drop_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
