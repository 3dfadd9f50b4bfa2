"""Learning application services."""

from .category_service import CategoryService
from .flashcard_service import FlashcardService
from .study_session_service import StudySessionService

__all__ = ["CategoryService", "FlashcardService", "StudySessionService"]
