"""ORM <-> domain mappers for the learning context."""

from .category_mapper import CategoryMapper
from .flashcard_mapper import FlashcardMapper
from .study_session_mapper import StudySessionMapper

__all__ = ["CategoryMapper", "FlashcardMapper", "StudySessionMapper"]
