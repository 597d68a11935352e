"""Timesheet Schemas — request body and response object.

The owning employee always comes from the route, never from the body.
"""

from backoffice.schemas.common import CamelModel, Numeric


class TimesheetInput(CamelModel):
    hours: Numeric
    rate: Numeric
    date: Numeric


class TimesheetRead(CamelModel):
    id: int
    hours: int | float
    rate: int | float
    date: int | float
    employee_id: int
