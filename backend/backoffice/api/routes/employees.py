"""Employee Routes — /employees and /employees/{employee_id}."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from backoffice.api.dependencies import get_gateway, to_http_response
from backoffice.core.pipeline import RequestContext
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.services.employee_controller import EmployeeController

router = APIRouter(prefix="/employees", tags=["employees"])


def get_controller(
    gateway: PersistenceGateway = Depends(get_gateway),
) -> EmployeeController:
    return EmployeeController(gateway)


@router.get("")
async def list_employees(
    controller: EmployeeController = Depends(get_controller),
):
    """List current employees."""
    return to_http_response(await controller.list(RequestContext()))


@router.post("", status_code=201)
async def create_employee(
    payload: dict[str, Any] | None = Body(None),
    controller: EmployeeController = Depends(get_controller),
):
    return to_http_response(await controller.create(RequestContext(body=payload)))


@router.get("/{employee_id}")
async def get_employee(
    employee_id: str,
    controller: EmployeeController = Depends(get_controller),
):
    return to_http_response(await controller.get(RequestContext(), employee_id))


@router.put("/{employee_id}")
async def update_employee(
    employee_id: str,
    payload: dict[str, Any] | None = Body(None),
    controller: EmployeeController = Depends(get_controller),
):
    return to_http_response(
        await controller.update(RequestContext(body=payload), employee_id),
    )


@router.delete("/{employee_id}")
async def delete_employee(
    employee_id: str,
    controller: EmployeeController = Depends(get_controller),
):
    """Soft delete: the employee is marked as no longer current and returned."""
    return to_http_response(await controller.delete(RequestContext(), employee_id))
