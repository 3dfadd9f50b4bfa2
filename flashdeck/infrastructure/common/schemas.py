"""Common schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class ApiModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def require_text(value: object, message: str) -> str:
    """
    Reject missing, non-string or whitespace-only text.

    Runs before type coercion so a wrong-typed value gets the same message
    as a missing one.

    The message is reported verbatim in the ``errors`` list of a 400 response.
    """
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError("required", message)
    return value


class ErrorResponse(BaseModel):
    """Single error body."""

    error: str = Field(..., description="Error message")


class FieldErrorsResponse(BaseModel):
    """Body returned when one or more request fields are invalid."""

    errors: list[str] = Field(..., description="One message per invalid field")


class IdResponse(ApiModel):
    """Body carrying only an entity ID."""

    id: str = Field(..., description="Entity ID")
