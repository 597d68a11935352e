"""Domain Types — identity types and the resource catalogue shared across layers.

Invariants:
    - Identifiers are numeric (int for whole values, float otherwise)
    - Resource.value is the JSON envelope key of a single object ("employee")
    - Resource.id_param is the path/parameter name of its identifier ("employeeId")

Design Decisions:
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum


# ─── Identity Types ──────────────────────────────────────────────

Identifier = int | float


# ─── Resources ───────────────────────────────────────────────────

class Resource(str, Enum):
    """The four persisted entities."""
    EMPLOYEE = "employee"
    TIMESHEET = "timesheet"
    MENU = "menu"
    MENU_ITEM = "menuItem"

    @property
    def id_param(self) -> str:
        return f"{self.value}Id"

    @property
    def collection(self) -> str:
        return f"{self.value}s"

    @property
    def label(self) -> str:
        return {
            Resource.EMPLOYEE: "Employee",
            Resource.TIMESHEET: "Timesheet",
            Resource.MENU: "Menu",
            Resource.MENU_ITEM: "Menu item",
        }[self]
