"""Protocol for Category repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import CategoryId
from flashdeck.domain.learning.entities import Category


class CategoryRepositoryProtocol(Protocol):
    """Protocol for Category repository operations in learning context."""

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        """
        Find a category by ID.

        Args:
            category_id: The category ID

        Returns:
            Category entity if found, None otherwise
        """
        ...

    def exists_by_id(self, category_id: CategoryId) -> bool:
        """Return True if a category with this ID is stored."""
        ...

    def find_all(self) -> list[Category]:
        """Return every stored category in no particular order."""
        ...

    def find_all_order_by_name_asc(self) -> list[Category]:
        """
        Return every stored category sorted by name.

        Returns:
            Categories ordered by case-sensitive code-point order of the name
        """
        ...

    def exists_by_name(self, name: str) -> bool:
        """Return True if a category with exactly this name is stored."""
        ...

    def find_by_name(self, name: str) -> Category | None:
        """
        Find a category by exact name.

        Args:
            name: The category name (case-sensitive)

        Returns:
            Category entity if found, None otherwise
        """
        ...

    def save(self, category: Category) -> Category:
        """
        Insert the category, or replace the stored one with the same ID.

        Args:
            category: The category entity to save

        Returns:
            The saved category entity
        """
        ...

    def delete_by_id(self, category_id: CategoryId) -> None:
        """Delete the category with this ID; a missing ID is a no-op."""
        ...
