"""MenuItem Schemas — request body and response object.

The owning menu always comes from the route, never from the body.
"""

from backoffice.schemas.common import CamelModel, Numeric, RequiredText


class MenuItemInput(CamelModel):
    name: RequiredText
    description: RequiredText
    inventory: Numeric
    price: Numeric


class MenuItemRead(CamelModel):
    id: int
    name: str
    description: str
    inventory: int | float
    price: int | float
    menu_id: int
