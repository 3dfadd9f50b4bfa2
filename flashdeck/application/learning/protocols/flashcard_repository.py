"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import FlashcardId, StudySessionId
from flashdeck.domain.learning.entities import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            Flashcard entity if found, None otherwise
        """
        ...

    def exists_by_id(self, flashcard_id: FlashcardId) -> bool:
        """Return True if a flashcard with this ID is stored."""
        ...

    def find_all(self) -> list[Flashcard]:
        """Return every stored flashcard."""
        ...

    def find_all_by_study_session_id(self, session_id: StudySessionId) -> list[Flashcard]:
        """Return the flashcards that belong to a study session."""
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Insert the flashcard, or replace the stored one with the same ID.

        Args:
            flashcard: The flashcard entity to save

        Returns:
            The saved flashcard entity
        """
        ...

    def delete_by_id(self, flashcard_id: FlashcardId) -> None:
        """Delete the flashcard with this ID; a missing ID is a no-op."""
        ...
