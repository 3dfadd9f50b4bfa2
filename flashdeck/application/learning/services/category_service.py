"""Application service for category operations."""

import structlog

from flashdeck.application.learning.dtos import CategoryRequest
from flashdeck.application.learning.mappers.category_mapper import CategoryMapper
from flashdeck.application.learning.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from flashdeck.application.learning.services.validation import (
    require_non_blank,
    require_non_null,
)
from flashdeck.domain.common.value_objects import CategoryId
from flashdeck.domain.learning.entities import Category
from flashdeck.exceptions import CategoryNameConflictError, CategoryNotFoundError

logger = structlog.get_logger(__name__)

CATEGORY_ID = "Category ID"
NAME = "Name"


class CategoryService:
    """Application service for category CRUD and lookups."""

    def __init__(
        self,
        category_repository: CategoryRepositoryProtocol,
        category_mapper: CategoryMapper,
    ) -> None:
        """Initialize service with repository protocol and request mapper."""
        self.category_repository = category_repository
        self.category_mapper = category_mapper

    def find_all(self) -> list[Category]:
        """Return every category sorted by name, ascending."""
        return self.category_repository.find_all_order_by_name_asc()

    def find_by_id(self, category_id: str) -> Category:
        """
        Get a category by ID.

        Raises:
            BadRequestError: If the ID is blank
            CategoryNotFoundError: If no category has this ID
        """
        require_non_blank(category_id, CATEGORY_ID)
        category = self.category_repository.find_by_id(CategoryId(category_id))
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    def find_by_name(self, name: str) -> Category:
        """
        Get a category by its exact name.

        Raises:
            BadRequestError: If the name is blank
            CategoryNotFoundError: If no category has this name
        """
        require_non_blank(name, NAME)
        category = self.category_repository.find_by_name(name)
        if category is None:
            raise CategoryNotFoundError(name=name)
        return category

    def exists_by_id(self, category_id: str) -> bool:
        if not isinstance(category_id, str) or not category_id.strip():
            return False
        return self.category_repository.exists_by_id(CategoryId(category_id))

    def assert_exists_by_id(self, category_id: str) -> None:
        """
        Ensure a category exists.

        Raises:
            BadRequestError: If the ID is blank
            CategoryNotFoundError: If no category has this ID
        """
        require_non_blank(category_id, CATEGORY_ID)
        if not self.category_repository.exists_by_id(CategoryId(category_id)):
            raise CategoryNotFoundError(category_id)

    def id_from_category_with_name(self, name: str) -> str:
        return self.find_by_name(name).id.value

    def create_category(self, request: CategoryRequest | None) -> Category:
        """
        Create a category with a server-issued ID.

        Args:
            request: Creation request holding the category name

        Returns:
            The saved category

        Raises:
            BadRequestError: If the request is missing or the name is blank
            CategoryNameConflictError: If the name is already taken
        """
        request = require_non_null(request)
        require_non_blank(request.name, NAME)
        if self.category_repository.exists_by_name(request.name):
            raise CategoryNameConflictError(request.name)

        category = self.category_repository.save(self.category_mapper.category_from(request))

        logger.info("created_category", category_id=category.id.value, name=category.name)
        return category

    def save(self, category: Category | None) -> Category:
        """
        Insert or replace a category keyed by its client-supplied ID.

        The name may be kept by the category that already owns it, so
        saving an unchanged category twice succeeds.

        Raises:
            BadRequestError: If the category is missing
            CategoryNameConflictError: If another category already has the name
        """
        category = require_non_null(category)
        require_non_blank(category.name, NAME)
        owner = self.category_repository.find_by_name(category.name)
        if owner is not None and owner.id != category.id:
            raise CategoryNameConflictError(category.name)

        category = self.category_repository.save(category)

        logger.info("saved_category", category_id=category.id.value, name=category.name)
        return category

    def delete_by_id(self, category_id: str) -> None:
        """
        Delete a category together with its study sessions and their flashcards.

        Raises:
            BadRequestError: If the ID is blank
            CategoryNotFoundError: If no category has this ID
        """
        self.assert_exists_by_id(category_id)
        self.category_repository.delete_by_id(CategoryId(category_id))
        logger.info("deleted_category", category_id=category_id)
