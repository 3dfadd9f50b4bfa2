"""Application service for study session operations."""

import structlog

from flashdeck.application.learning.dtos import StudySessionRequest
from flashdeck.application.learning.mappers.study_session_mapper import StudySessionMapper
from flashdeck.application.learning.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from flashdeck.application.learning.services.category_service import CategoryService
from flashdeck.application.learning.services.validation import (
    require_non_blank,
    require_non_null,
)
from flashdeck.domain.common.value_objects import CategoryId, StudySessionId
from flashdeck.domain.learning.entities import StudySession
from flashdeck.exceptions import StudySessionNotFoundError

logger = structlog.get_logger(__name__)

STUDY_SESSION_ID = "Study session ID"
NAME = "Name"


class StudySessionService:
    """
    Application service for study session CRUD and lookups.

    Every write first checks that the referenced category exists.
    Session names are not checked for uniqueness.
    """

    def __init__(
        self,
        study_session_repository: StudySessionRepositoryProtocol,
        category_service: CategoryService,
        study_session_mapper: StudySessionMapper,
    ) -> None:
        """Initialize service with repository protocol and collaborators."""
        self.study_session_repository = study_session_repository
        self.category_service = category_service
        self.study_session_mapper = study_session_mapper

    def find_all(self) -> list[StudySession]:
        return self.study_session_repository.find_all()

    def find_by_id(self, session_id: str) -> StudySession:
        """
        Get a study session by ID.

        Raises:
            BadRequestError: If the ID is blank
            StudySessionNotFoundError: If no study session has this ID
        """
        require_non_blank(session_id, STUDY_SESSION_ID)
        session = self.study_session_repository.find_by_id(StudySessionId(session_id))
        if session is None:
            raise StudySessionNotFoundError(session_id)
        return session

    def find_all_by_category_id(self, category_id: str) -> list[StudySession]:
        """
        Get the study sessions of a category.

        Raises:
            CategoryNotFoundError: If the category does not exist
        """
        self.category_service.assert_exists_by_id(category_id)
        return self.study_session_repository.find_all_by_category_id(CategoryId(category_id))

    def exists_by_id(self, session_id: str) -> bool:
        if not isinstance(session_id, str) or not session_id.strip():
            return False
        return self.study_session_repository.exists_by_id(StudySessionId(session_id))

    def assert_exists_by_id(self, session_id: str) -> None:
        """
        Ensure a study session exists.

        Raises:
            BadRequestError: If the ID is blank
            StudySessionNotFoundError: If no study session has this ID
        """
        require_non_blank(session_id, STUDY_SESSION_ID)
        if not self.study_session_repository.exists_by_id(StudySessionId(session_id)):
            raise StudySessionNotFoundError(session_id)

    def id_from_study_session_with_name(self, name: str) -> str:
        """
        Resolve a study session name to its ID.

        Raises:
            BadRequestError: If the name is blank
            StudySessionNotFoundError: If no study session has this name
        """
        require_non_blank(name, NAME)
        session = self.study_session_repository.find_by_name(name)
        if session is None:
            raise StudySessionNotFoundError(name=name)
        return session.id.value

    def create_study_session(self, request: StudySessionRequest | None) -> StudySession:
        """
        Create a study session with a server-issued ID.

        Args:
            request: Creation request holding category ID and name

        Returns:
            The saved study session

        Raises:
            BadRequestError: If the request is missing or a field is blank
            CategoryNotFoundError: If the referenced category does not exist
        """
        request = require_non_null(request)
        require_non_blank(request.name, NAME)
        self.category_service.assert_exists_by_id(request.category_id)

        session = self.study_session_repository.save(
            self.study_session_mapper.study_session_from(request)
        )

        logger.info(
            "created_study_session",
            study_session_id=session.id.value,
            category_id=session.category_id.value,
        )
        return session

    def save(self, session: StudySession | None) -> StudySession:
        """
        Insert or replace a study session keyed by its client-supplied ID.

        Raises:
            BadRequestError: If the study session is missing
            CategoryNotFoundError: If the referenced category does not exist
        """
        session = require_non_null(session)
        self.category_service.assert_exists_by_id(session.category_id.value)

        session = self.study_session_repository.save(session)

        logger.info(
            "saved_study_session",
            study_session_id=session.id.value,
            category_id=session.category_id.value,
        )
        return session

    def delete_by_id(self, session_id: str) -> None:
        """
        Delete a study session together with its flashcards.

        Raises:
            BadRequestError: If the ID is blank
            StudySessionNotFoundError: If no study session has this ID
        """
        self.assert_exists_by_id(session_id)
        self.study_session_repository.delete_by_id(StudySessionId(session_id))
        logger.info("deleted_study_session", study_session_id=session_id)
