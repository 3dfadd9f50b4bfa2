"""In-memory collaborators for the learning service tests."""

import pytest

from flashdeck.application.learning.mappers import (
    CategoryMapper,
    FlashcardMapper,
    StudySessionMapper,
)
from flashdeck.application.learning.services import (
    CategoryService,
    FlashcardService,
    StudySessionService,
)
from flashdeck.domain.common.value_objects import CategoryId, FlashcardId, StudySessionId
from flashdeck.domain.learning.entities import Category, Flashcard, StudySession


class SequentialIdSource:
    """Issues id-1, id-2, ... so tests can predict new IDs."""

    def __init__(self) -> None:
        self.issued = 0

    def new_id(self) -> str:
        self.issued += 1
        return f"id-{self.issued}"


class InMemoryCategoryRepository:
    def __init__(self) -> None:
        self.items: dict[CategoryId, Category] = {}

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        return self.items.get(category_id)

    def exists_by_id(self, category_id: CategoryId) -> bool:
        return category_id in self.items

    def find_all(self) -> list[Category]:
        return list(self.items.values())

    def find_all_order_by_name_asc(self) -> list[Category]:
        return sorted(self.items.values(), key=lambda category: category.name)

    def exists_by_name(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def find_by_name(self, name: str) -> Category | None:
        return next((c for c in self.items.values() if c.name == name), None)

    def save(self, category: Category) -> Category:
        self.items[category.id] = category
        return category

    def delete_by_id(self, category_id: CategoryId) -> None:
        self.items.pop(category_id, None)


class InMemoryStudySessionRepository:
    def __init__(self) -> None:
        self.items: dict[StudySessionId, StudySession] = {}

    def find_by_id(self, session_id: StudySessionId) -> StudySession | None:
        return self.items.get(session_id)

    def exists_by_id(self, session_id: StudySessionId) -> bool:
        return session_id in self.items

    def find_all(self) -> list[StudySession]:
        return list(self.items.values())

    def find_by_name(self, name: str) -> StudySession | None:
        return next((s for s in self.items.values() if s.name == name), None)

    def find_all_by_category_id(self, category_id: CategoryId) -> list[StudySession]:
        return [s for s in self.items.values() if s.category_id == category_id]

    def save(self, session: StudySession) -> StudySession:
        self.items[session.id] = session
        return session

    def delete_by_id(self, session_id: StudySessionId) -> None:
        self.items.pop(session_id, None)


class InMemoryFlashcardRepository:
    def __init__(self) -> None:
        self.items: dict[FlashcardId, Flashcard] = {}

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        return self.items.get(flashcard_id)

    def exists_by_id(self, flashcard_id: FlashcardId) -> bool:
        return flashcard_id in self.items

    def find_all(self) -> list[Flashcard]:
        return list(self.items.values())

    def find_all_by_study_session_id(self, session_id: StudySessionId) -> list[Flashcard]:
        return [f for f in self.items.values() if f.study_session_id == session_id]

    def save(self, flashcard: Flashcard) -> Flashcard:
        self.items[flashcard.id] = flashcard
        return flashcard

    def delete_by_id(self, flashcard_id: FlashcardId) -> None:
        self.items.pop(flashcard_id, None)


@pytest.fixture
def id_source() -> SequentialIdSource:
    return SequentialIdSource()


@pytest.fixture
def category_repository() -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository()


@pytest.fixture
def study_session_repository() -> InMemoryStudySessionRepository:
    return InMemoryStudySessionRepository()


@pytest.fixture
def flashcard_repository() -> InMemoryFlashcardRepository:
    return InMemoryFlashcardRepository()


@pytest.fixture
def category_service(
    category_repository: InMemoryCategoryRepository, id_source: SequentialIdSource
) -> CategoryService:
    return CategoryService(category_repository, CategoryMapper(id_source))


@pytest.fixture
def study_session_service(
    study_session_repository: InMemoryStudySessionRepository,
    category_service: CategoryService,
    id_source: SequentialIdSource,
) -> StudySessionService:
    return StudySessionService(
        study_session_repository, category_service, StudySessionMapper(id_source)
    )


@pytest.fixture
def flashcard_service(
    flashcard_repository: InMemoryFlashcardRepository,
    study_session_service: StudySessionService,
    id_source: SequentialIdSource,
) -> FlashcardService:
    return FlashcardService(flashcard_repository, study_session_service, FlashcardMapper(id_source))
