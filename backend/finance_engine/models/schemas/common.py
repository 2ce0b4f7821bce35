"""Shared schema helpers: camelCase models and JSON-number decimals."""

from decimal import Decimal
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def to_json_number(value: Decimal) -> Union[int, float]:
    """Render a Decimal as a JSON number, keeping integral values as ints."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def to_jsonable(value: Any) -> Any:
    """Recursively convert Decimals inside free-form catalog metadata."""
    if isinstance(value, Decimal):
        return to_json_number(value)
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


# Decimal internally, plain number on the wire
JsonDecimal = Annotated[
    Decimal,
    PlainSerializer(to_json_number, return_type=Union[int, float], when_used="json"),
]


class CamelModel(BaseModel):
    """Base schema using camelCase aliases while accepting snake_case names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
