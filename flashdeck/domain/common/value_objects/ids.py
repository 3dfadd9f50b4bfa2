from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class CategoryId(EntityId):
    """Strongly-typed category identifier."""


@dataclass(frozen=True)
class StudySessionId(EntityId):
    """Strongly-typed study session identifier."""


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""
