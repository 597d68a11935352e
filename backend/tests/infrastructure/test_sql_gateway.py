"""SQL Gateway — named-parameter binding and error translation on SQLite."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backoffice.core.errors import IntegrityViolationError, PersistenceError
from backoffice.db import statements
from backoffice.db.schema import create_schema
from backoffice.infrastructure.database import create_engine_for
from backoffice.infrastructure.sql_gateway import SqlGateway, bind_params


@pytest.fixture
async def gateway():
    engine = create_engine_for("sqlite+aiosqlite:///:memory:")
    await create_schema(engine)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield SqlGateway(session)
    await engine.dispose()


def test_bind_params_strips_marker():
    assert bind_params({"$menuId": 1, "title": "x"}) == {"menuId": 1, "title": "x"}
    assert bind_params(None) == {}


async def test_run_returns_generated_id(gateway):
    first = await gateway.run(statements.CREATE_MENU, {"$title": "Lunch"})
    second = await gateway.run(statements.CREATE_MENU, {"$title": "Dinner"})
    assert first.last_id == 1
    assert second.last_id == 2


async def test_get_and_all_return_plain_dicts(gateway):
    await gateway.run(statements.CREATE_MENU, {"$title": "Lunch"})
    row = await gateway.get(statements.GET_MENU, {"$menuId": 1})
    assert row == {"id": 1, "title": "Lunch"}
    assert await gateway.all(statements.LIST_MENUS) == [row]


async def test_get_missing_row_returns_none(gateway):
    assert await gateway.get(statements.GET_MENU, {"$menuId": 5}) is None


async def test_unreferenced_params_are_ignored(gateway):
    await gateway.run(
        statements.CREATE_MENU, {"$title": "Lunch", "$unused": 3},
    )
    assert await gateway.get(statements.GET_MENU, {"$menuId": 1, "$x": 0})


async def test_run_reports_changes(gateway):
    await gateway.run(statements.CREATE_MENU, {"$title": "Lunch"})
    result = await gateway.run(
        statements.UPDATE_MENU, {"$menuId": 1, "$title": "Brunch"},
    )
    assert result.changes == 1
    assert result.last_id is None


async def test_foreign_key_violation_is_integrity_error(gateway):
    with pytest.raises(IntegrityViolationError):
        await gateway.run(statements.CREATE_MENU_ITEM, {
            "$name": "Soup", "$description": "Hot", "$inventory": 1,
            "$price": 1, "$menuId": 99,
        })


async def test_session_usable_after_translated_error(gateway):
    with pytest.raises(IntegrityViolationError):
        await gateway.run(statements.CREATE_MENU, {"$title": None})
    result = await gateway.run(statements.CREATE_MENU, {"$title": "Lunch"})
    assert result.last_id == 1


async def test_invalid_sql_is_persistence_error(gateway):
    with pytest.raises(PersistenceError):
        await gateway.all("SELECT * FROM no_such_table")


async def test_out_of_range_bind_is_persistence_error(gateway):
    with pytest.raises(PersistenceError):
        await gateway.get(statements.GET_MENU, {"$menuId": 2 ** 64})
    # session still usable after the rollback
    assert await gateway.all(statements.LIST_MENUS) == []
