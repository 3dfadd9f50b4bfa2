"""Repository for Category domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import CategoryId
from flashdeck.domain.learning.entities import Category
from flashdeck.infrastructure.learning.mappers.category_mapper import CategoryMapper
from flashdeck.models import Category as CategoryORM


class CategoryRepository:
    """
    Repository for Category domain entities.

    Writes are flushed but not committed; the request-scoped session
    owns the transaction.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CategoryMapper()

    def _get(self, category_id: str) -> CategoryORM | None:
        stmt = select(CategoryORM).where(CategoryORM.id == category_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        orm_model = self._get(category_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists_by_id(self, category_id: CategoryId) -> bool:
        stmt = select(CategoryORM.id).where(CategoryORM.id == category_id.value).limit(1)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def find_all(self) -> list[Category]:
        orm_models = self.db.execute(select(CategoryORM)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_all_order_by_name_asc(self) -> list[Category]:
        """
        Get all categories ordered by name.

        Returns:
            List of category entities in code-point order of the name
        """
        stmt = select(CategoryORM).order_by(CategoryORM.name, CategoryORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        # ORDER BY follows the database collation; names compare by code point
        return sorted(
            (self.mapper.to_domain(orm) for orm in orm_models),
            key=lambda category: category.name,
        )

    def exists_by_name(self, name: str) -> bool:
        stmt = select(CategoryORM.id).where(CategoryORM.name == name).limit(1)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def find_by_name(self, name: str) -> Category | None:
        stmt = select(CategoryORM).where(CategoryORM.name == name)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, category: Category) -> Category:
        """
        Save a category entity (insert or replace by ID).

        Args:
            category: The category entity to save

        Returns:
            Saved category entity
        """
        orm_model = self._get(category.id.value)
        if orm_model is None:
            orm_model = self.mapper.to_orm(category)
            self.db.add(orm_model)
        else:
            self.mapper.to_orm(category, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def delete_by_id(self, category_id: CategoryId) -> None:
        """Delete a category and, through the ORM cascade, its study sessions."""
        self.db.flush()
        # Collections loaded earlier may predate a session moving between categories
        self.db.expire_all()
        orm_model = self._get(category_id.value)
        if orm_model is None:
            return
        self.db.delete(orm_model)
        self.db.flush()
