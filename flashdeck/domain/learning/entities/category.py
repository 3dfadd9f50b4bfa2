"""
Category entity: the top-level grouping of study material.
"""

from dataclasses import dataclass

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.value_objects import CategoryId

from ._rules import ensure_not_blank


@dataclass
class Category(Entity[CategoryId]):
    """
    Uniquely named grouping of study sessions.

    Business Rules:
    - Name cannot be empty
    - Name is unique across all categories (enforced by the service
      and by a storage-level constraint)
    """

    id: CategoryId
    name: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        ensure_not_blank(self.name, "name", "Name")

    @classmethod
    def create(cls, id: CategoryId, name: str) -> "Category":
        """Create a new category with a freshly issued ID."""
        return cls(id=id, name=name)
