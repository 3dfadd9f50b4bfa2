"""Pydantic schemas for Flashcard API request/response validation."""

from pydantic import Field, ValidationInfo, field_validator

from flashdeck.domain.common.value_objects import FlashcardId, StudySessionId
from flashdeck.domain.learning.entities import Flashcard as FlashcardEntity
from flashdeck.infrastructure.common.schemas import ApiModel, require_text
from flashdeck.infrastructure.learning.schemas.messages import (
    ANSWER_REQUIRED,
    ID_REQUIRED,
    QUESTION_REQUIRED,
    STUDY_SESSION_ID_REQUIRED,
)

_REQUIRED_MESSAGES = {
    "id": ID_REQUIRED,
    "study_session_id": STUDY_SESSION_ID_REQUIRED,
    "question": QUESTION_REQUIRED,
    "answer": ANSWER_REQUIRED,
}


class FlashcardCreateRequest(ApiModel):
    """Schema for creating a flashcard."""

    study_session_id: str | None = Field(
        None, validate_default=True, description="ID of the owning study session"
    )
    question: str | None = Field(None, validate_default=True, description="Question text")
    answer: str | None = Field(None, validate_default=True, description="Answer text")

    @field_validator("study_session_id", "question", "answer", mode="before")
    @classmethod
    def text_required(cls, value: object, info: ValidationInfo) -> str:
        return require_text(value, _REQUIRED_MESSAGES[str(info.field_name)])


class FlashcardUpsertRequest(ApiModel):
    """Schema for inserting or replacing a flashcard by client-supplied ID."""

    id: str | None = Field(None, validate_default=True, description="Flashcard ID")
    study_session_id: str | None = Field(
        None, validate_default=True, description="ID of the owning study session"
    )
    question: str | None = Field(None, validate_default=True, description="Question text")
    answer: str | None = Field(None, validate_default=True, description="Answer text")

    @field_validator("id", "study_session_id", "question", "answer", mode="before")
    @classmethod
    def text_required(cls, value: object, info: ValidationInfo) -> str:
        return require_text(value, _REQUIRED_MESSAGES[str(info.field_name)])

    def to_entity(self) -> FlashcardEntity:
        return FlashcardEntity(
            id=FlashcardId(str(self.id)),
            study_session_id=StudySessionId(str(self.study_session_id)),
            question=str(self.question),
            answer=str(self.answer),
        )


class Flashcard(ApiModel):
    """Schema for Flashcard response."""

    id: str
    study_session_id: str
    question: str
    answer: str

    @classmethod
    def from_entity(cls, flashcard: FlashcardEntity) -> "Flashcard":
        return cls(
            id=flashcard.id.value,
            study_session_id=flashcard.study_session_id.value,
            question=flashcard.question,
            answer=flashcard.answer,
        )
