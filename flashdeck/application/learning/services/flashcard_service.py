"""Application service for flashcard operations."""

import structlog

from flashdeck.application.learning.dtos import FlashcardRequest
from flashdeck.application.learning.mappers.flashcard_mapper import FlashcardMapper
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.services.study_session_service import StudySessionService
from flashdeck.application.learning.services.validation import (
    require_non_blank,
    require_non_null,
)
from flashdeck.domain.common.value_objects import FlashcardId, StudySessionId
from flashdeck.domain.learning.entities import Flashcard
from flashdeck.exceptions import FlashcardNotFoundError

logger = structlog.get_logger(__name__)

FLASHCARD_ID = "Flashcard ID"


class FlashcardService:
    """Application service for flashcard CRUD operations."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        study_session_service: StudySessionService,
        flashcard_mapper: FlashcardMapper,
    ) -> None:
        """Initialize service with repository protocol and collaborators."""
        self.flashcard_repository = flashcard_repository
        self.study_session_service = study_session_service
        self.flashcard_mapper = flashcard_mapper

    def find_all(self) -> list[Flashcard]:
        return self.flashcard_repository.find_all()

    def find_by_id(self, flashcard_id: str) -> Flashcard:
        """
        Get a flashcard by ID.

        Raises:
            BadRequestError: If the ID is blank
            FlashcardNotFoundError: If no flashcard has this ID
        """
        require_non_blank(flashcard_id, FLASHCARD_ID)
        flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id))
        if flashcard is None:
            raise FlashcardNotFoundError(flashcard_id)
        return flashcard

    def find_all_by_study_session_id(self, session_id: str) -> list[Flashcard]:
        """
        Get the flashcards of a study session.

        Raises:
            StudySessionNotFoundError: If the study session does not exist
        """
        self.study_session_service.assert_exists_by_id(session_id)
        return self.flashcard_repository.find_all_by_study_session_id(StudySessionId(session_id))

    def exists_by_id(self, flashcard_id: str) -> bool:
        if not isinstance(flashcard_id, str) or not flashcard_id.strip():
            return False
        return self.flashcard_repository.exists_by_id(FlashcardId(flashcard_id))

    def create_flashcard(self, request: FlashcardRequest | None) -> Flashcard:
        """
        Create a flashcard with a server-issued ID.

        Args:
            request: Creation request holding study session ID, question and answer

        Returns:
            The saved flashcard

        Raises:
            BadRequestError: If the request is missing or a field is blank
            StudySessionNotFoundError: If the referenced study session does not exist
        """
        request = require_non_null(request)
        require_non_blank(request.question, "Question")
        require_non_blank(request.answer, "Answer")
        self.study_session_service.assert_exists_by_id(request.study_session_id)

        flashcard = self.flashcard_repository.save(self.flashcard_mapper.flashcard_from(request))

        logger.info(
            "created_flashcard",
            flashcard_id=flashcard.id.value,
            study_session_id=flashcard.study_session_id.value,
        )
        return flashcard

    def save(self, flashcard: Flashcard | None) -> Flashcard:
        """
        Insert or replace a flashcard keyed by its client-supplied ID.

        Raises:
            BadRequestError: If the flashcard is missing
            StudySessionNotFoundError: If the referenced study session does not exist
        """
        flashcard = require_non_null(flashcard)
        self.study_session_service.assert_exists_by_id(flashcard.study_session_id.value)

        flashcard = self.flashcard_repository.save(flashcard)

        logger.info(
            "saved_flashcard",
            flashcard_id=flashcard.id.value,
            study_session_id=flashcard.study_session_id.value,
        )
        return flashcard

    def delete_by_id(self, flashcard_id: str) -> None:
        """
        Delete a flashcard.

        Raises:
            BadRequestError: If the ID is blank
            FlashcardNotFoundError: If no flashcard has this ID
        """
        require_non_blank(flashcard_id, FLASHCARD_ID)
        if not self.flashcard_repository.exists_by_id(FlashcardId(flashcard_id)):
            raise FlashcardNotFoundError(flashcard_id)

        self.flashcard_repository.delete_by_id(FlashcardId(flashcard_id))
        logger.info("deleted_flashcard", flashcard_id=flashcard_id)
