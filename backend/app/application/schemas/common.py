"""Shared Pydantic building blocks for request and response DTOs."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel

Scalar = str | int | float


def _not_blank(value: Scalar) -> Scalar:
    if isinstance(value, str) and not value:
        raise ValueError("Field must not be empty")
    return value


# A present, non-empty string or number; numbers are stored as given.
RequiredScalar = Annotated[Scalar, AfterValidator(_not_blank)]


class CamelModel(BaseModel):
    """Base DTO exposing camelCase field names on the wire."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class MessageResponse(CamelModel):
    """Plain informational response."""

    message: str


class OperationResponse(CamelModel):
    """Response for operations that report an explicit success flag."""

    success: bool
    message: str
