"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - spy_gateway records every persistence call made while serving a request

Design Decisions:
    - SQLite in-memory: fast, no external dependency, matches the default store
    - Gateway fakes override get_gateway, not SqlGateway methods: routes stay untouched
"""

import pytest
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from httpx import ASGITransport, AsyncClient

from backoffice.api.dependencies import get_gateway
from backoffice.db import statements
from backoffice.db.schema import create_schema, drop_schema
from backoffice.infrastructure.database import (
    DatabaseSessionManager, create_engine_for, get_db,
)
from backoffice.infrastructure.sql_gateway import SqlGateway
import backoffice.infrastructure.database as db_module
from backoffice.main import app


@pytest.fixture
async def test_engine():
    engine = create_engine_for("sqlite+aiosqlite:///:memory:")
    await create_schema(engine)
    yield engine
    await drop_schema(engine)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = DatabaseSessionManager(test_engine)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


class _SpyGateway(SqlGateway):
    """SqlGateway that appends (verb, statement) to a shared log."""

    def __init__(self, db, log):
        super().__init__(db)
        self._log = log

    async def get(self, statement, params=None):
        self._log.append(("get", statement))
        return await super().get(statement, params)

    async def all(self, statement, params=None):
        self._log.append(("all", statement))
        return await super().all(statement, params)

    async def run(self, statement, params=None):
        self._log.append(("run", statement))
        return await super().run(statement, params)


@pytest.fixture
def spy_gateway(client):
    """Record persistence calls; returns the log list."""
    log = []

    async def override_get_gateway(db: AsyncSession = Depends(get_db)):
        return _SpyGateway(db, log)

    app.dependency_overrides[get_gateway] = override_get_gateway
    return log


class _BlindGuardGateway(SqlGateway):
    """SqlGateway whose dependent-items probe always reports none."""

    async def get(self, statement, params=None):
        if statement == statements.FIND_MENU_DEPENDENT:
            return None
        return await super().get(statement, params)


@pytest.fixture
def blind_guard_gateway(client):
    """Simulate a menu item inserted after the delete guard ran."""
    async def override_get_gateway(db: AsyncSession = Depends(get_db)):
        return _BlindGuardGateway(db)

    app.dependency_overrides[get_gateway] = override_get_gateway
