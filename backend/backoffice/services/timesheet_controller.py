"""Timesheet Controller — CRUD pipelines for an employee's timesheets.

Invariants:
    - Every operation resolves the owning employee first (404 if absent)
    - Timesheets are looked up, updated and deleted only within that employee
    - An employee with no timesheets lists as an empty collection (200)
"""

from backoffice.core.pipeline import RequestContext, Respond, Stage, run_pipeline
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.db import statements
from backoffice.services.pipeline_stages import (
    fetch_many, insert_row, refetch, respond_empty, respond_many, respond_one,
    run_statement, update_row, validate_body,
)
from backoffice.services.resources import EMPLOYEES, TIMESHEETS
from backoffice.services.route_resolver import RouteParameterResolver


class TimesheetController:
    """Timesheet operations scoped to one employee."""

    spec = TIMESHEETS

    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway
        self._resolver = RouteParameterResolver(gateway)

    def _resolve(self, employee_id: str, timesheet_id: str | None = None) -> list[Stage]:
        stages = [self._resolver.resolve(EMPLOYEES, employee_id)]
        if timesheet_id is not None:
            stages.append(self._resolver.resolve(self.spec, timesheet_id))
        return stages

    async def list(self, ctx: RequestContext, employee_id: str) -> Respond:
        return await run_pipeline(
            ctx,
            *self._resolve(employee_id),
            fetch_many(self._gateway, self.spec),
            respond_many(self.spec),
        )

    async def get(
        self, ctx: RequestContext, employee_id: str, timesheet_id: str,
    ) -> Respond:
        return await run_pipeline(
            ctx,
            *self._resolve(employee_id, timesheet_id),
            respond_one(self.spec),
        )

    async def create(self, ctx: RequestContext, employee_id: str) -> Respond:
        return await run_pipeline(
            ctx,
            *self._resolve(employee_id),
            validate_body(self.spec),
            insert_row(self._gateway, self.spec),
            refetch(self._gateway, self.spec),
            respond_one(self.spec, 201),
        )

    async def update(
        self, ctx: RequestContext, employee_id: str, timesheet_id: str,
    ) -> Respond:
        return await run_pipeline(
            ctx,
            *self._resolve(employee_id, timesheet_id),
            validate_body(self.spec),
            update_row(self._gateway, self.spec),
            refetch(self._gateway, self.spec),
            respond_one(self.spec),
        )

    async def delete(
        self, ctx: RequestContext, employee_id: str, timesheet_id: str,
    ) -> Respond:
        return await run_pipeline(
            ctx,
            *self._resolve(employee_id, timesheet_id),
            run_statement(self._gateway, self.spec, statements.DELETE_TIMESHEET),
            respond_empty(204),
        )
