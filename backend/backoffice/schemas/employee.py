"""Employee Schemas — request body and response object."""

from pydantic import field_serializer

from backoffice.schemas.common import CamelModel, Numeric, RequiredText


class EmployeeInput(CamelModel):
    """Employee body — isCurrentEmployee defaults to true when omitted."""
    name: RequiredText
    position: RequiredText
    wage: Numeric
    is_current_employee: bool = True

    @field_serializer("is_current_employee")
    def serialize_flag(self, value: bool) -> int:
        return 1 if value else 0


class EmployeeRead(CamelModel):
    id: int
    name: str
    position: str
    wage: int | float
    is_current_employee: bool
