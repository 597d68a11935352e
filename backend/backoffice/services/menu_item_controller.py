"""MenuItem Controller — CRUD pipelines for the items of one menu.

Invariants:
    - Every operation resolves the owning menu first (404 if absent)
    - Items are looked up, updated and deleted only within that menu
"""

from backoffice.core.pipeline import RequestContext, Respond, Stage, run_pipeline
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.db import statements
from backoffice.services.pipeline_stages import (
    fetch_many, insert_row, refetch, respond_empty, respond_many, respond_one,
    run_statement, update_row, validate_body,
)
from backoffice.services.resources import MENU_ITEMS, MENUS
from backoffice.services.route_resolver import RouteParameterResolver


class MenuItemController:
    """Menu item operations scoped to one menu."""

    spec = MENU_ITEMS

    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway
        self._resolver = RouteParameterResolver(gateway)

    def _resolve(self, menu_id: str, menu_item_id: str | None = None) -> list[Stage]:
        stages = [self._resolver.resolve(MENUS, menu_id)]
        if menu_item_id is not None:
            stages.append(self._resolver.resolve(self.spec, menu_item_id))
        return stages

    async def list(self, ctx: RequestContext, menu_id: str) -> Respond:
        return await run_pipeline(
            ctx,
            *self._resolve(menu_id),
            fetch_many(self._gateway, self.spec),
            respond_many(self.spec),
        )

    async def get(
        self, ctx: RequestContext, menu_id: str, menu_item_id: str,
    ) -> Respond:
        return await run_pipeline(
            ctx,
            *self._resolve(menu_id, menu_item_id),
            respond_one(self.spec),
        )

    async def create(self, ctx: RequestContext, menu_id: str) -> Respond:
        return await run_pipeline(
            ctx,
            *self._resolve(menu_id),
            validate_body(self.spec),
            insert_row(self._gateway, self.spec),
            refetch(self._gateway, self.spec),
            respond_one(self.spec, 201),
        )

    async def update(
        self, ctx: RequestContext, menu_id: str, menu_item_id: str,
    ) -> Respond:
        return await run_pipeline(
            ctx,
            *self._resolve(menu_id, menu_item_id),
            validate_body(self.spec),
            update_row(self._gateway, self.spec),
            refetch(self._gateway, self.spec),
            respond_one(self.spec),
        )

    async def delete(
        self, ctx: RequestContext, menu_id: str, menu_item_id: str,
    ) -> Respond:
        return await run_pipeline(
            ctx,
            *self._resolve(menu_id, menu_item_id),
            run_statement(self._gateway, self.spec, statements.DELETE_MENU_ITEM),
            respond_empty(204),
        )
