"""Employee Controller — CRUD pipelines for staff members.

Invariants:
    - List returns only current employees (is_current_employee = 1)
    - Delete is a soft delete: the flag flips to 0, the row stays and is returned
    - Get by id still finds a soft-deleted employee
"""

from backoffice.core.pipeline import RequestContext, Respond, run_pipeline
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.db import statements
from backoffice.services.pipeline_stages import (
    fetch_many, insert_row, refetch, respond_many, respond_one,
    run_statement, update_row, validate_body,
)
from backoffice.services.resources import EMPLOYEES
from backoffice.services.route_resolver import RouteParameterResolver


class EmployeeController:
    """Employee operations, each one ordered pipeline."""

    spec = EMPLOYEES

    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway
        self._resolver = RouteParameterResolver(gateway)

    async def list(self, ctx: RequestContext) -> Respond:
        return await run_pipeline(
            ctx,
            fetch_many(self._gateway, self.spec),
            respond_many(self.spec),
        )

    async def get(self, ctx: RequestContext, employee_id: str) -> Respond:
        return await run_pipeline(
            ctx,
            self._resolver.resolve(self.spec, employee_id),
            respond_one(self.spec),
        )

    async def create(self, ctx: RequestContext) -> Respond:
        return await run_pipeline(
            ctx,
            validate_body(self.spec),
            insert_row(self._gateway, self.spec),
            refetch(self._gateway, self.spec),
            respond_one(self.spec, 201),
        )

    async def update(self, ctx: RequestContext, employee_id: str) -> Respond:
        return await run_pipeline(
            ctx,
            self._resolver.resolve(self.spec, employee_id),
            validate_body(self.spec),
            update_row(self._gateway, self.spec),
            refetch(self._gateway, self.spec),
            respond_one(self.spec),
        )

    async def delete(self, ctx: RequestContext, employee_id: str) -> Respond:
        return await run_pipeline(
            ctx,
            self._resolver.resolve(self.spec, employee_id),
            run_statement(self._gateway, self.spec, statements.RETIRE_EMPLOYEE),
            refetch(self._gateway, self.spec),
            respond_one(self.spec),
        )
