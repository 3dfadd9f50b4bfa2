"""Mapper for StudySession ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import CategoryId, StudySessionId
from flashdeck.domain.learning.entities import StudySession
from flashdeck.models import StudySession as StudySessionORM


class StudySessionMapper:
    """Mapper for StudySession ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: StudySessionORM) -> StudySession:
        """Convert ORM model to domain entity."""
        return StudySession(
            id=StudySessionId(orm_model.id),
            category_id=CategoryId(orm_model.category_id),
            name=orm_model.name,
        )

    def to_orm(
        self, domain_entity: StudySession, orm_model: StudySessionORM | None = None
    ) -> StudySessionORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.category_id = domain_entity.category_id.value
            orm_model.name = domain_entity.name
            return orm_model

        return StudySessionORM(
            id=domain_entity.id.value,
            category_id=domain_entity.category_id.value,
            name=domain_entity.name,
        )
