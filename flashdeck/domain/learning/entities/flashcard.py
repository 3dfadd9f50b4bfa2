"""
Flashcard entity: a question and answer pair.
"""

from dataclasses import dataclass

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.value_objects import FlashcardId, StudySessionId

from ._rules import ensure_not_blank


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    Study card belonging to a study session.

    Business Rules:
    - Question and answer cannot be empty
    - Must reference an existing study session (checked by the service)
    """

    id: FlashcardId
    study_session_id: StudySessionId
    question: str
    answer: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        ensure_not_blank(self.question, "question", "Question")
        ensure_not_blank(self.answer, "answer", "Answer")

    @classmethod
    def create(
        cls,
        id: FlashcardId,
        study_session_id: StudySessionId,
        question: str,
        answer: str,
    ) -> "Flashcard":
        """Create a new flashcard with a freshly issued ID."""
        return cls(id=id, study_session_id=study_session_id, question=question, answer=answer)
