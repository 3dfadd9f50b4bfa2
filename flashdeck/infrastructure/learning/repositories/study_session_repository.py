"""Repository for StudySession domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import CategoryId, StudySessionId
from flashdeck.domain.learning.entities import StudySession
from flashdeck.infrastructure.learning.mappers.study_session_mapper import StudySessionMapper
from flashdeck.models import StudySession as StudySessionORM


class StudySessionRepository:
    """Repository for StudySession domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = StudySessionMapper()

    def _get(self, session_id: str) -> StudySessionORM | None:
        stmt = select(StudySessionORM).where(StudySessionORM.id == session_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, session_id: StudySessionId) -> StudySession | None:
        orm_model = self._get(session_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists_by_id(self, session_id: StudySessionId) -> bool:
        stmt = select(StudySessionORM.id).where(StudySessionORM.id == session_id.value).limit(1)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def find_all(self) -> list[StudySession]:
        stmt = select(StudySessionORM).order_by(StudySessionORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_name(self, name: str) -> StudySession | None:
        """
        Find a study session by exact name.

        Names are not unique; the session with the lowest ID wins.
        """
        stmt = (
            select(StudySessionORM)
            .where(StudySessionORM.name == name)
            .order_by(StudySessionORM.id)
            .limit(1)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all_by_category_id(self, category_id: CategoryId) -> list[StudySession]:
        stmt = (
            select(StudySessionORM)
            .where(StudySessionORM.category_id == category_id.value)
            .order_by(StudySessionORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, session: StudySession) -> StudySession:
        """
        Save a study session entity (insert or replace by ID).

        Args:
            session: The study session entity to save

        Returns:
            Saved study session entity
        """
        orm_model = self._get(session.id.value)
        if orm_model is None:
            orm_model = self.mapper.to_orm(session)
            self.db.add(orm_model)
        else:
            self.mapper.to_orm(session, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def delete_by_id(self, session_id: StudySessionId) -> None:
        """Delete a study session and, through the ORM cascade, its flashcards."""
        self.db.flush()
        self.db.expire_all()
        orm_model = self._get(session_id.value)
        if orm_model is None:
            return
        self.db.delete(orm_model)
        self.db.flush()
