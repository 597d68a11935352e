"""Resource Catalogue — per-entity schemas and statements consumed by generic stages.

Invariants:
    - lookup is the single-row lookup used both by the route resolver and by re-fetch
    - Child resources (timesheet, menu item) look up rows scoped to their parent id
"""

from dataclasses import dataclass

from backoffice.core.domain_types import Resource
from backoffice.core.parameter_store import param_key
from backoffice.db import statements
from backoffice.schemas.common import CamelModel
from backoffice.schemas.employee import EmployeeInput, EmployeeRead
from backoffice.schemas.menu import MenuInput, MenuRead
from backoffice.schemas.menu_item import MenuItemInput, MenuItemRead
from backoffice.schemas.timesheet import TimesheetInput, TimesheetRead


@dataclass(frozen=True)
class ResourceSpec:
    """Everything a generic stage needs to know about one entity."""
    resource: Resource
    input_model: type[CamelModel]
    read_model: type[CamelModel]
    lookup: str
    listing: str
    insert: str
    update: str

    @property
    def key(self) -> str:
        """Envelope key of one object, e.g. "menuItem"."""
        return self.resource.value

    @property
    def collection(self) -> str:
        return self.resource.collection

    @property
    def id_key(self) -> str:
        """Parameter Store key of this entity's identifier, e.g. "$menuItemId"."""
        return param_key(self.resource.id_param)

    @property
    def label(self) -> str:
        return self.resource.label


EMPLOYEES = ResourceSpec(
    resource=Resource.EMPLOYEE,
    input_model=EmployeeInput,
    read_model=EmployeeRead,
    lookup=statements.GET_EMPLOYEE,
    listing=statements.LIST_EMPLOYEES,
    insert=statements.CREATE_EMPLOYEE,
    update=statements.UPDATE_EMPLOYEE,
)

TIMESHEETS = ResourceSpec(
    resource=Resource.TIMESHEET,
    input_model=TimesheetInput,
    read_model=TimesheetRead,
    lookup=statements.GET_TIMESHEET,
    listing=statements.LIST_TIMESHEETS,
    insert=statements.CREATE_TIMESHEET,
    update=statements.UPDATE_TIMESHEET,
)

MENUS = ResourceSpec(
    resource=Resource.MENU,
    input_model=MenuInput,
    read_model=MenuRead,
    lookup=statements.GET_MENU,
    listing=statements.LIST_MENUS,
    insert=statements.CREATE_MENU,
    update=statements.UPDATE_MENU,
)

MENU_ITEMS = ResourceSpec(
    resource=Resource.MENU_ITEM,
    input_model=MenuItemInput,
    read_model=MenuItemRead,
    lookup=statements.GET_MENU_ITEM,
    listing=statements.LIST_MENU_ITEMS,
    insert=statements.CREATE_MENU_ITEM,
    update=statements.UPDATE_MENU_ITEM,
)
