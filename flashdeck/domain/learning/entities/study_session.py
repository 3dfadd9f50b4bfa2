"""
StudySession entity: a named subgroup within a category.
"""

from dataclasses import dataclass

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.value_objects import CategoryId, StudySessionId

from ._rules import ensure_not_blank


@dataclass
class StudySession(Entity[StudySessionId]):
    """
    Named set of flashcards belonging to one category.

    Business Rules:
    - Name cannot be empty
    - Must reference an existing category (checked by the service)
    - Names are not required to be unique
    """

    id: StudySessionId
    category_id: CategoryId
    name: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        ensure_not_blank(self.name, "name", "Name")

    @classmethod
    def create(cls, id: StudySessionId, category_id: CategoryId, name: str) -> "StudySession":
        """Create a new study session with a freshly issued ID."""
        return cls(id=id, category_id=category_id, name=name)
