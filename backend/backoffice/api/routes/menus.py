"""Menu Routes — /menus and /menus/{menu_id}."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from backoffice.api.dependencies import get_gateway, to_http_response
from backoffice.core.pipeline import RequestContext
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.services.menu_controller import MenuController

router = APIRouter(prefix="/menus", tags=["menus"])


def get_controller(
    gateway: PersistenceGateway = Depends(get_gateway),
) -> MenuController:
    return MenuController(gateway)


@router.get("")
async def list_menus(controller: MenuController = Depends(get_controller)):
    return to_http_response(await controller.list(RequestContext()))


@router.post("", status_code=201)
async def create_menu(
    payload: dict[str, Any] | None = Body(None),
    controller: MenuController = Depends(get_controller),
):
    return to_http_response(await controller.create(RequestContext(body=payload)))


@router.get("/{menu_id}")
async def get_menu(
    menu_id: str, controller: MenuController = Depends(get_controller),
):
    return to_http_response(await controller.get(RequestContext(), menu_id))


@router.put("/{menu_id}")
async def update_menu(
    menu_id: str,
    payload: dict[str, Any] | None = Body(None),
    controller: MenuController = Depends(get_controller),
):
    return to_http_response(
        await controller.update(RequestContext(body=payload), menu_id),
    )


@router.delete("/{menu_id}", status_code=204)
async def delete_menu(
    menu_id: str, controller: MenuController = Depends(get_controller),
):
    """Delete a menu; refused with 400 while it still has menu items."""
    return to_http_response(await controller.delete(RequestContext(), menu_id))
