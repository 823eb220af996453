from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel


# Prices stay Decimal in Python but go out as JSON numbers
Money = Annotated[
    Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")
]


class CamelModel(BaseModel):
    """Base model exposing camelCase keys on the wire.

    Incoming bodies may use either the camelCase alias or the Python name.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True


def reject_explicit_null(value, field_name: str):
    """Patch fields may be omitted, but not set to null."""
    if value is None:
        raise ValueError(f"{to_camel(field_name)} cannot be null")
    return value


def normalize_name(value):
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("Name cannot be empty")
    return value
