"""Ports consumed by the learning services."""

from .category_repository import CategoryRepositoryProtocol
from .flashcard_repository import FlashcardRepositoryProtocol
from .id_source import IdSourceProtocol
from .study_session_repository import StudySessionRepositoryProtocol

__all__ = [
    "CategoryRepositoryProtocol",
    "FlashcardRepositoryProtocol",
    "IdSourceProtocol",
    "StudySessionRepositoryProtocol",
]
