"""Menu Schemas — request body and response object."""

from backoffice.schemas.common import CamelModel, RequiredText


class MenuInput(CamelModel):
    title: RequiredText


class MenuRead(CamelModel):
    id: int
    title: str
