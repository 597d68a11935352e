"""Controllers against an in-memory fake gateway — pipeline wiring without SQL.

Tests cover:
    - Route identifiers are bound before body fields and win over them
    - Refetch that finds nothing raises PersistenceError, never 404
    - An insert that yields no identifier raises PersistenceError
    - Menu delete maps a late integrity violation to a 400 conflict
"""

import pytest

from backoffice.core.errors import IntegrityViolationError, PersistenceError
from backoffice.core.pipeline import RequestContext
from backoffice.core.repository_protocols import RunResult
from backoffice.db import statements
from backoffice.services.employee_controller import EmployeeController
from backoffice.services.menu_controller import MenuController
from backoffice.services.menu_item_controller import MenuItemController


class FakeGateway:
    """Answers get() from a statement → row table and records run() params."""

    def __init__(self, rows=None, last_id=1, run_error=None):
        self.rows = rows or {}
        self.last_id = last_id
        self.run_error = run_error
        self.runs = []

    async def get(self, statement, params=None):
        return self.rows.get(statement)

    async def all(self, statement, params=None):
        return []

    async def run(self, statement, params=None):
        self.runs.append((statement, dict(params or {})))
        if self.run_error:
            raise self.run_error
        return RunResult(last_id=self.last_id, changes=1)


async def test_route_menu_id_wins_over_body():
    gateway = FakeGateway(rows={
        statements.GET_MENU: {"id": 3, "title": "Lunch"},
        statements.GET_MENU_ITEM: {
            "id": 1, "name": "Soup", "description": "Hot",
            "inventory": 1, "price": 2, "menu_id": 3,
        },
    })
    body = {"menuItem": {
        "name": "Soup", "description": "Hot", "inventory": 1, "price": 2,
        "menuId": 8,
    }}
    result = await MenuItemController(gateway).create(
        RequestContext(body=body), "3",
    )
    assert result.status_code == 201
    statement, params = gateway.runs[0]
    assert statement == statements.CREATE_MENU_ITEM
    assert params["$menuId"] == 3
    assert "$menuItemId" not in params


async def test_refetch_miss_is_persistence_error():
    gateway = FakeGateway()
    with pytest.raises(PersistenceError) as exc_info:
        await MenuController(gateway).create(
            RequestContext(body={"menu": {"title": "Lunch"}}),
        )
    assert exc_info.value.http_status == 500


async def test_insert_without_identifier_is_persistence_error():
    gateway = FakeGateway(last_id=None)
    with pytest.raises(PersistenceError):
        await MenuController(gateway).create(
            RequestContext(body={"menu": {"title": "Lunch"}}),
        )


async def test_employee_delete_runs_soft_delete():
    row = {
        "id": 2, "name": "Ada", "position": "Cook", "wage": 10,
        "is_current_employee": 0,
    }
    gateway = FakeGateway(rows={statements.GET_EMPLOYEE: row})
    result = await EmployeeController(gateway).delete(RequestContext(), "2")
    assert result.status_code == 200
    assert result.body["employee"]["isCurrentEmployee"] is False
    assert gateway.runs[0][0] == statements.RETIRE_EMPLOYEE


async def test_menu_delete_integrity_violation_is_conflict():
    gateway = FakeGateway(
        rows={statements.GET_MENU: {"id": 4, "title": "Lunch"}},
        run_error=IntegrityViolationError("constraint", "run"),
    )
    result = await MenuController(gateway).delete(RequestContext(), "4")
    assert result.status_code == 400
    assert result.body["error"]["code"] == "DEPENDENTS_EXIST"


async def test_menu_delete_other_persistence_error_propagates():
    gateway = FakeGateway(
        rows={statements.GET_MENU: {"id": 4, "title": "Lunch"}},
        run_error=PersistenceError("disk I/O error", "run"),
    )
    with pytest.raises(PersistenceError):
        await MenuController(gateway).delete(RequestContext(), "4")
