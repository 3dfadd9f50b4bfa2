"""Mapper for FlashcardRequest -> Flashcard."""

from flashdeck.application.learning.dtos import FlashcardRequest
from flashdeck.application.learning.protocols.id_source import IdSourceProtocol
from flashdeck.domain.common.value_objects import FlashcardId, StudySessionId
from flashdeck.domain.learning.entities import Flashcard


class FlashcardMapper:
    """Builds a new Flashcard from a creation request."""

    def __init__(self, id_source: IdSourceProtocol) -> None:
        self.id_source = id_source

    def flashcard_from(self, request: FlashcardRequest) -> Flashcard:
        return Flashcard.create(
            id=FlashcardId(self.id_source.new_id()),
            study_session_id=StudySessionId(request.study_session_id),
            question=request.question,
            answer=request.answer,
        )
