"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time.
All identifiers in this domain are opaque, non-empty strings.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import ValidationError


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed entity identifiers.

    Wrapping the raw string keeps a category id from being passed where
    a study session id is expected.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(f"{self.__class__.__name__} must not be blank", field="id")

    def __str__(self) -> str:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
