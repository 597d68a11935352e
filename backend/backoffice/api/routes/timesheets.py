"""Timesheet Routes — /employees/{employee_id}/timesheets[/{timesheet_id}]."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from backoffice.api.dependencies import get_gateway, to_http_response
from backoffice.core.pipeline import RequestContext
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.services.timesheet_controller import TimesheetController

router = APIRouter(
    prefix="/employees/{employee_id}/timesheets", tags=["timesheets"],
)


def get_controller(
    gateway: PersistenceGateway = Depends(get_gateway),
) -> TimesheetController:
    return TimesheetController(gateway)


@router.get("")
async def list_timesheets(
    employee_id: str,
    controller: TimesheetController = Depends(get_controller),
):
    return to_http_response(await controller.list(RequestContext(), employee_id))


@router.post("", status_code=201)
async def create_timesheet(
    employee_id: str,
    payload: dict[str, Any] | None = Body(None),
    controller: TimesheetController = Depends(get_controller),
):
    return to_http_response(
        await controller.create(RequestContext(body=payload), employee_id),
    )


@router.get("/{timesheet_id}")
async def get_timesheet(
    employee_id: str,
    timesheet_id: str,
    controller: TimesheetController = Depends(get_controller),
):
    return to_http_response(
        await controller.get(RequestContext(), employee_id, timesheet_id),
    )


@router.put("/{timesheet_id}")
async def update_timesheet(
    employee_id: str,
    timesheet_id: str,
    payload: dict[str, Any] | None = Body(None),
    controller: TimesheetController = Depends(get_controller),
):
    return to_http_response(
        await controller.update(
            RequestContext(body=payload), employee_id, timesheet_id,
        ),
    )


@router.delete("/{timesheet_id}", status_code=204)
async def delete_timesheet(
    employee_id: str,
    timesheet_id: str,
    controller: TimesheetController = Depends(get_controller),
):
    return to_http_response(
        await controller.delete(RequestContext(), employee_id, timesheet_id),
    )
