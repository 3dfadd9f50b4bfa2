"""Pydantic schemas for Category API request/response validation."""

from pydantic import Field, field_validator

from flashdeck.domain.common.value_objects import CategoryId
from flashdeck.domain.learning.entities import Category as CategoryEntity
from flashdeck.infrastructure.common.schemas import ApiModel, require_text
from flashdeck.infrastructure.learning.schemas.messages import ID_REQUIRED, NAME_REQUIRED


class CategoryCreateRequest(ApiModel):
    """Schema for creating a category."""

    name: str | None = Field(None, validate_default=True, description="Unique category name")

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, value: object) -> str:
        return require_text(value, NAME_REQUIRED)


class CategoryUpsertRequest(ApiModel):
    """Schema for inserting or replacing a category by client-supplied ID."""

    id: str | None = Field(None, validate_default=True, description="Category ID")
    name: str | None = Field(None, validate_default=True, description="Unique category name")

    @field_validator("id", mode="before")
    @classmethod
    def id_required(cls, value: object) -> str:
        return require_text(value, ID_REQUIRED)

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, value: object) -> str:
        return require_text(value, NAME_REQUIRED)

    def to_entity(self) -> CategoryEntity:
        return CategoryEntity(id=CategoryId(str(self.id)), name=str(self.name))


class Category(ApiModel):
    """Schema for Category response."""

    id: str
    name: str

    @classmethod
    def from_entity(cls, category: CategoryEntity) -> "Category":
        return cls(id=category.id.value, name=category.name)
