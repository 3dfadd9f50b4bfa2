"""
Request validation helpers shared by the learning services.

Plain functions rather than a base class: every service calls them at
entry, before any repository access.
"""

from typing import TypeVar

from flashdeck.exceptions import BadRequestError

T = TypeVar("T")

REQUEST_BODY_NULL = "Request body must not be null"


def require_non_null(value: T | None) -> T:
    """
    Fail if the request object is missing.

    Raises:
        BadRequestError: If value is None
    """
    if value is None:
        raise BadRequestError(REQUEST_BODY_NULL)
    return value


def require_non_blank(value: str | None, field_name: str) -> str:
    """
    Fail if a string field is missing or whitespace-only.

    Args:
        value: The field value
        field_name: Human-readable field name used in the error message

    Raises:
        BadRequestError: If value is None, not a string, or blank after trimming
    """
    if not isinstance(value, str) or not value.strip():
        raise BadRequestError(f"{field_name} must not be null or empty")
    return value
