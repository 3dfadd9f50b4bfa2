"""DTOs for learning services."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryRequest:
    """Data needed to create a category; the ID is issued by the server."""

    name: str


@dataclass(frozen=True)
class StudySessionRequest:
    """Data needed to create a study session; the ID is issued by the server."""

    category_id: str
    name: str


@dataclass(frozen=True)
class FlashcardRequest:
    """Data needed to create a flashcard; the ID is issued by the server."""

    study_session_id: str
    question: str
    answer: str
