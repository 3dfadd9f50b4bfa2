"""Common value objects shared across domain modules."""

from .ids import CategoryId, FlashcardId, StudySessionId

__all__ = [
    "CategoryId",
    "FlashcardId",
    "StudySessionId",
]
