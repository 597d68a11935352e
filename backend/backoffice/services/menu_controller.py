"""Menu Controller — CRUD pipelines for menus, with the dependent-items guard.

Invariants:
    - A menu that still owns menu items is never deleted: the guard answers 400
      before the delete statement runs
    - The guard and the delete are not one transaction; a menu item inserted in
      between makes the store's foreign key reject the delete, which is reported
      as the same 400 and leaves the menu in place
"""

from backoffice.core.errors import ConflictError, IntegrityViolationError
from backoffice.core.pipeline import (
    PROCEED, RequestContext, Respond, Stage, run_pipeline,
)
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.db import statements
from backoffice.services.pipeline_stages import (
    fetch_many, insert_row, refetch, respond_empty, respond_many, respond_one,
    update_row, validate_body,
)
from backoffice.services.resources import MENUS
from backoffice.services.route_resolver import RouteParameterResolver

DEPENDENTS = "menu items"


class MenuController:
    """Menu operations, each one ordered pipeline."""

    spec = MENUS

    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway
        self._resolver = RouteParameterResolver(gateway)

    def _guard_no_items(self) -> Stage:
        gateway, spec = self._gateway, self.spec

        async def ensure_no_menu_items(ctx: RequestContext):
            dependent = await gateway.get(
                statements.FIND_MENU_DEPENDENT, ctx.params.entries(),
            )
            if dependent is not None:
                raise ConflictError(spec.label, ctx.params.get(spec.id_key), DEPENDENTS)
            return PROCEED

        return ensure_no_menu_items

    def _delete_menu(self) -> Stage:
        gateway, spec = self._gateway, self.spec

        async def delete_menu(ctx: RequestContext):
            try:
                await gateway.run(statements.DELETE_MENU, ctx.params.entry(spec.id_key))
            except IntegrityViolationError:
                # a menu item was added after the guard ran
                raise ConflictError(spec.label, ctx.params.get(spec.id_key), DEPENDENTS)
            return PROCEED

        return delete_menu

    async def list(self, ctx: RequestContext) -> Respond:
        return await run_pipeline(
            ctx,
            fetch_many(self._gateway, self.spec),
            respond_many(self.spec),
        )

    async def get(self, ctx: RequestContext, menu_id: str) -> Respond:
        return await run_pipeline(
            ctx,
            self._resolver.resolve(self.spec, menu_id),
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

    async def update(self, ctx: RequestContext, menu_id: str) -> Respond:
        return await run_pipeline(
            ctx,
            self._resolver.resolve(self.spec, menu_id),
            validate_body(self.spec),
            update_row(self._gateway, self.spec),
            refetch(self._gateway, self.spec),
            respond_one(self.spec),
        )

    async def delete(self, ctx: RequestContext, menu_id: str) -> Respond:
        return await run_pipeline(
            ctx,
            self._resolver.resolve(self.spec, menu_id),
            self._guard_no_items(),
            self._delete_menu(),
            respond_empty(204),
        )
