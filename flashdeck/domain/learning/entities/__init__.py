"""Learning domain entities."""

from .category import Category
from .flashcard import Flashcard
from .study_session import StudySession

__all__ = ["Category", "Flashcard", "StudySession"]
