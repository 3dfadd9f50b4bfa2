"""Mapper for Flashcard ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import FlashcardId, StudySessionId
from flashdeck.domain.learning.entities import Flashcard
from flashdeck.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard(
            id=FlashcardId(orm_model.id),
            study_session_id=StudySessionId(orm_model.study_session_id),
            question=orm_model.question,
            answer=orm_model.answer,
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.study_session_id = domain_entity.study_session_id.value
            orm_model.question = domain_entity.question
            orm_model.answer = domain_entity.answer
            return orm_model

        return FlashcardORM(
            id=domain_entity.id.value,
            study_session_id=domain_entity.study_session_id.value,
            question=domain_entity.question,
            answer=domain_entity.answer,
        )
