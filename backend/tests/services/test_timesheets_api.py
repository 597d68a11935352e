"""Timesheet routes — /api/employees/{employeeId}/timesheets CRUD.

Tests cover:
    - Create binds employeeId from the path, never from the body
    - List is scoped to the employee; empty list is 200
    - Parent 404 precedes child lookups and body validation
    - A timesheet of another employee is not reachable through this employee
    - Delete answers 204 and the row is gone
"""

TIMESHEET = {"hours": 8, "rate": 15.5, "date": 1700000000}


async def _employee(client, name="Ada"):
    resp = await client.post(
        "/api/employees",
        json={"employee": {"name": name, "position": "Cook", "wage": 20}},
    )
    return resp.json()["employee"]["id"]


async def _timesheet(client, employee_id, **overrides):
    resp = await client.post(
        f"/api/employees/{employee_id}/timesheets",
        json={"timesheet": {**TIMESHEET, **overrides}},
    )
    assert resp.status_code == 201
    return resp.json()["timesheet"]


async def test_create_timesheet(client):
    employee_id = await _employee(client)
    timesheet = await _timesheet(client, employee_id)
    assert timesheet == {
        "id": timesheet["id"],
        "hours": 8,
        "rate": 15.5,
        "date": 1700000000,
        "employeeId": employee_id,
    }


async def test_create_ignores_body_employee_id(client):
    employee_id = await _employee(client)
    other_id = await _employee(client, name="Bob")
    timesheet = await _timesheet(client, employee_id, employeeId=other_id)
    assert timesheet["employeeId"] == employee_id


async def test_create_for_unknown_employee_returns_404(client):
    resp = await client.post(
        "/api/employees/99/timesheets", json={"timesheet": TIMESHEET},
    )
    assert resp.status_code == 404


async def test_unknown_employee_wins_over_invalid_body(client):
    resp = await client.post(
        "/api/employees/99/timesheets", json={"timesheet": {"hours": "x"}},
    )
    assert resp.status_code == 404


async def test_create_missing_field_returns_400(client):
    employee_id = await _employee(client)
    resp = await client.post(
        f"/api/employees/{employee_id}/timesheets",
        json={"timesheet": {"hours": 8, "rate": 10}},
    )
    assert resp.status_code == 400


async def test_create_accepts_zero_hours(client):
    employee_id = await _employee(client)
    timesheet = await _timesheet(client, employee_id, hours=0)
    assert timesheet["hours"] == 0


async def test_list_is_scoped_to_employee(client):
    ada = await _employee(client)
    bob = await _employee(client, name="Bob")
    first = await _timesheet(client, ada)
    second = await _timesheet(client, ada, hours=4)
    await _timesheet(client, bob)

    resp = await client.get(f"/api/employees/{ada}/timesheets")
    assert resp.status_code == 200
    assert resp.json()["timesheets"] == [first, second]


async def test_list_for_employee_without_timesheets_is_empty(client):
    employee_id = await _employee(client)
    resp = await client.get(f"/api/employees/{employee_id}/timesheets")
    assert resp.status_code == 200
    assert resp.json() == {"timesheets": []}


async def test_list_for_unknown_employee_returns_404(client):
    resp = await client.get("/api/employees/5/timesheets")
    assert resp.status_code == 404


async def test_get_timesheet(client):
    employee_id = await _employee(client)
    timesheet = await _timesheet(client, employee_id)
    resp = await client.get(
        f"/api/employees/{employee_id}/timesheets/{timesheet['id']}",
    )
    assert resp.status_code == 200
    assert resp.json() == {"timesheet": timesheet}


async def test_timesheet_of_other_employee_is_not_found(client):
    ada = await _employee(client)
    bob = await _employee(client, name="Bob")
    timesheet = await _timesheet(client, ada)
    resp = await client.get(f"/api/employees/{bob}/timesheets/{timesheet['id']}")
    assert resp.status_code == 404


async def test_update_timesheet(client):
    employee_id = await _employee(client)
    timesheet = await _timesheet(client, employee_id)
    resp = await client.put(
        f"/api/employees/{employee_id}/timesheets/{timesheet['id']}",
        json={"timesheet": {"hours": 6, "rate": 20, "date": 1700000100}},
    )
    assert resp.status_code == 200
    assert resp.json()["timesheet"] == {
        "id": timesheet["id"],
        "hours": 6,
        "rate": 20,
        "date": 1700000100,
        "employeeId": employee_id,
    }


async def test_update_unknown_timesheet_returns_404(client):
    employee_id = await _employee(client)
    resp = await client.put(
        f"/api/employees/{employee_id}/timesheets/77",
        json={"timesheet": TIMESHEET},
    )
    assert resp.status_code == 404


async def test_delete_timesheet(client):
    employee_id = await _employee(client)
    timesheet = await _timesheet(client, employee_id)
    url = f"/api/employees/{employee_id}/timesheets/{timesheet['id']}"

    resp = await client.delete(url)
    assert resp.status_code == 204
    assert resp.content == b""

    resp = await client.get(f"/api/employees/{employee_id}/timesheets")
    assert resp.json()["timesheets"] == []


async def test_delete_unknown_timesheet_returns_404(client):
    employee_id = await _employee(client)
    resp = await client.delete(f"/api/employees/{employee_id}/timesheets/3")
    assert resp.status_code == 404


async def test_malformed_timesheet_id_returns_400(client):
    employee_id = await _employee(client)
    resp = await client.delete(f"/api/employees/{employee_id}/timesheets/-1")
    assert resp.status_code == 400
