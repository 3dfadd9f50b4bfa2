"""Repository for Flashcard domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import FlashcardId, StudySessionId
from flashdeck.domain.learning.entities import Flashcard
from flashdeck.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from flashdeck.models import Flashcard as FlashcardORM


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def _get(self, flashcard_id: str) -> FlashcardORM | None:
        stmt = select(FlashcardORM).where(FlashcardORM.id == flashcard_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        orm_model = self._get(flashcard_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists_by_id(self, flashcard_id: FlashcardId) -> bool:
        stmt = select(FlashcardORM.id).where(FlashcardORM.id == flashcard_id.value).limit(1)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def find_all(self) -> list[Flashcard]:
        stmt = select(FlashcardORM).order_by(FlashcardORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_all_by_study_session_id(self, session_id: StudySessionId) -> list[Flashcard]:
        """
        Get all flashcards for a study session.

        Args:
            session_id: The study session ID

        Returns:
            List of flashcard entities ordered by ID
        """
        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.study_session_id == session_id.value)
            .order_by(FlashcardORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (insert or replace by ID).

        Args:
            flashcard: The flashcard entity to save

        Returns:
            Saved flashcard entity
        """
        orm_model = self._get(flashcard.id.value)
        if orm_model is None:
            orm_model = self.mapper.to_orm(flashcard)
            self.db.add(orm_model)
        else:
            self.mapper.to_orm(flashcard, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def delete_by_id(self, flashcard_id: FlashcardId) -> None:
        orm_model = self._get(flashcard_id.value)
        if orm_model is None:
            return
        self.db.delete(orm_model)
        self.db.flush()
