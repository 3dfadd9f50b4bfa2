"""Pydantic schemas for StudySession API request/response validation."""

from pydantic import Field, field_validator

from flashdeck.domain.common.value_objects import CategoryId, StudySessionId
from flashdeck.domain.learning.entities import StudySession as StudySessionEntity
from flashdeck.infrastructure.common.schemas import ApiModel, require_text
from flashdeck.infrastructure.learning.schemas.messages import (
    CATEGORY_ID_REQUIRED,
    ID_REQUIRED,
    NAME_REQUIRED,
)


class StudySessionCreateRequest(ApiModel):
    """Schema for creating a study session."""

    category_id: str | None = Field(
        None, validate_default=True, description="ID of the owning category"
    )
    name: str | None = Field(None, validate_default=True, description="Study session name")

    @field_validator("category_id", mode="before")
    @classmethod
    def category_id_required(cls, value: object) -> str:
        return require_text(value, CATEGORY_ID_REQUIRED)

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, value: object) -> str:
        return require_text(value, NAME_REQUIRED)


class StudySessionUpsertRequest(ApiModel):
    """Schema for inserting or replacing a study session by client-supplied ID."""

    id: str | None = Field(None, validate_default=True, description="Study session ID")
    category_id: str | None = Field(
        None, validate_default=True, description="ID of the owning category"
    )
    name: str | None = Field(None, validate_default=True, description="Study session name")

    @field_validator("id", mode="before")
    @classmethod
    def id_required(cls, value: object) -> str:
        return require_text(value, ID_REQUIRED)

    @field_validator("category_id", mode="before")
    @classmethod
    def category_id_required(cls, value: object) -> str:
        return require_text(value, CATEGORY_ID_REQUIRED)

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, value: object) -> str:
        return require_text(value, NAME_REQUIRED)

    def to_entity(self) -> StudySessionEntity:
        return StudySessionEntity(
            id=StudySessionId(str(self.id)),
            category_id=CategoryId(str(self.category_id)),
            name=str(self.name),
        )


class StudySession(ApiModel):
    """Schema for StudySession response."""

    id: str
    category_id: str
    name: str

    @classmethod
    def from_entity(cls, session: StudySessionEntity) -> "StudySession":
        return cls(id=session.id.value, category_id=session.category_id.value, name=session.name)
