"""Learning context schemas."""

from flashdeck.infrastructure.learning.schemas.category_schemas import (
    Category,
    CategoryCreateRequest,
    CategoryUpsertRequest,
)
from flashdeck.infrastructure.learning.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardCreateRequest,
    FlashcardUpsertRequest,
)
from flashdeck.infrastructure.learning.schemas.study_session_schemas import (
    StudySession,
    StudySessionCreateRequest,
    StudySessionUpsertRequest,
)

__all__ = [
    "Category",
    "CategoryCreateRequest",
    "CategoryUpsertRequest",
    "Flashcard",
    "FlashcardCreateRequest",
    "FlashcardUpsertRequest",
    "StudySession",
    "StudySessionCreateRequest",
    "StudySessionUpsertRequest",
]
