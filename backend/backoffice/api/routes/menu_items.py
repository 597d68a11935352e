"""Menu Item Routes — /menus/{menu_id}/menu-items[/{menu_item_id}]."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from backoffice.api.dependencies import get_gateway, to_http_response
from backoffice.core.pipeline import RequestContext
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.services.menu_item_controller import MenuItemController

router = APIRouter(prefix="/menus/{menu_id}/menu-items", tags=["menu-items"])


def get_controller(
    gateway: PersistenceGateway = Depends(get_gateway),
) -> MenuItemController:
    return MenuItemController(gateway)


@router.get("")
async def list_menu_items(
    menu_id: str, controller: MenuItemController = Depends(get_controller),
):
    return to_http_response(await controller.list(RequestContext(), menu_id))


@router.post("", status_code=201)
async def create_menu_item(
    menu_id: str,
    payload: dict[str, Any] | None = Body(None),
    controller: MenuItemController = Depends(get_controller),
):
    return to_http_response(
        await controller.create(RequestContext(body=payload), menu_id),
    )


@router.get("/{menu_item_id}")
async def get_menu_item(
    menu_id: str,
    menu_item_id: str,
    controller: MenuItemController = Depends(get_controller),
):
    return to_http_response(
        await controller.get(RequestContext(), menu_id, menu_item_id),
    )


@router.put("/{menu_item_id}")
async def update_menu_item(
    menu_id: str,
    menu_item_id: str,
    payload: dict[str, Any] | None = Body(None),
    controller: MenuItemController = Depends(get_controller),
):
    return to_http_response(
        await controller.update(
            RequestContext(body=payload), menu_id, menu_item_id,
        ),
    )


@router.delete("/{menu_item_id}", status_code=204)
async def delete_menu_item(
    menu_id: str,
    menu_item_id: str,
    controller: MenuItemController = Depends(get_controller),
):
    return to_http_response(
        await controller.delete(RequestContext(), menu_id, menu_item_id),
    )
