"""Shared Field Types — numeric and text constraints used by every input model.

Invariants:
    - Numeric accepts numbers and numeric strings, rejects booleans, NaN, infinities
      and integers too large for a float
    - Whole numbers within the 64-bit store range stay int so they round-trip
      unchanged; larger ones become float
    - RequiredText rejects empty strings
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backoffice.core.identifiers import to_number


def _coerce_number(value: object) -> object:
    number = to_number(value)
    if number is None:
        raise ValueError("must be a finite number")
    return number


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


Numeric = Annotated[int | float, BeforeValidator(_coerce_number)]
RequiredText = Annotated[str, Field(min_length=1), AfterValidator(_reject_blank)]


class CamelModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python and in rows."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )
