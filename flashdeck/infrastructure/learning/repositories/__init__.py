"""SQLAlchemy repositories for the learning context."""

from .category_repository import CategoryRepository
from .flashcard_repository import FlashcardRepository
from .study_session_repository import StudySessionRepository

__all__ = ["CategoryRepository", "FlashcardRepository", "StudySessionRepository"]
