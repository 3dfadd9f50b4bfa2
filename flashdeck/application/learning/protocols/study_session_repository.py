"""Protocol for StudySession repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import CategoryId, StudySessionId
from flashdeck.domain.learning.entities import StudySession


class StudySessionRepositoryProtocol(Protocol):
    """Protocol for StudySession repository operations in learning context."""

    def find_by_id(self, session_id: StudySessionId) -> StudySession | None:
        """
        Find a study session by ID.

        Args:
            session_id: The study session ID

        Returns:
            StudySession entity if found, None otherwise
        """
        ...

    def exists_by_id(self, session_id: StudySessionId) -> bool:
        """Return True if a study session with this ID is stored."""
        ...

    def find_all(self) -> list[StudySession]:
        """Return every stored study session."""
        ...

    def find_by_name(self, name: str) -> StudySession | None:
        """Return a study session with exactly this name, if any."""
        ...

    def find_all_by_category_id(self, category_id: CategoryId) -> list[StudySession]:
        """Return the study sessions that belong to a category."""
        ...

    def save(self, session: StudySession) -> StudySession:
        """Insert the study session, or replace the stored one with the same ID."""
        ...

    def delete_by_id(self, session_id: StudySessionId) -> None:
        """Delete the study session with this ID; a missing ID is a no-op."""
        ...
