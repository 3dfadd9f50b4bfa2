"""Tests for the SQLAlchemy learning repositories."""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import CategoryId, FlashcardId, StudySessionId
from flashdeck.domain.learning.entities import Category, Flashcard, StudySession
from flashdeck.infrastructure.learning.repositories import (
    CategoryRepository,
    FlashcardRepository,
    StudySessionRepository,
)


def _make_category(id: str, name: str) -> Category:
    return Category(id=CategoryId(id), name=name)


def _make_session(id: str, category_id: str = "c1", name: str = "Thermo") -> StudySession:
    return StudySession(id=StudySessionId(id), category_id=CategoryId(category_id), name=name)


class TestCategoryRepository:
    def test_order_by_name_uses_code_points(self, db_session: Session) -> None:
        repository = CategoryRepository(db_session)
        for index, name in enumerate(["biology", "Zoology", "Applied Mathematics"]):
            repository.save(_make_category(f"c{index}", name))

        names = [c.name for c in repository.find_all_order_by_name_asc()]

        assert names == ["Applied Mathematics", "Zoology", "biology"]

    def test_save_replaces_existing(self, db_session: Session) -> None:
        repository = CategoryRepository(db_session)
        repository.save(_make_category("c1", "Science"))

        repository.save(_make_category("c1", "Natural Science"))

        assert repository.find_by_id(CategoryId("c1")) == _make_category("c1", "Natural Science")
        assert repository.exists_by_name("Science") is False

    def test_unique_name_enforced_by_storage(self, db_session: Session) -> None:
        repository = CategoryRepository(db_session)
        repository.save(_make_category("c1", "Science"))

        with pytest.raises(IntegrityError):
            repository.save(_make_category("c2", "Science"))

    def test_delete_missing_is_noop(self, db_session: Session) -> None:
        repository = CategoryRepository(db_session)

        repository.delete_by_id(CategoryId("c404"))

        assert repository.find_all() == []


class TestStudySessionRepository:
    def test_find_by_name_returns_lowest_id(self, db_session: Session) -> None:
        CategoryRepository(db_session).save(_make_category("c1", "Science"))
        repository = StudySessionRepository(db_session)
        repository.save(_make_session("s2"))
        repository.save(_make_session("s1"))

        session = repository.find_by_name("Thermo")

        assert session is not None
        assert session.id == StudySessionId("s1")

    def test_foreign_key_enforced_by_storage(self, db_session: Session) -> None:
        with pytest.raises(IntegrityError):
            StudySessionRepository(db_session).save(_make_session("s1", category_id="c404"))

    def test_delete_removes_flashcards(self, db_session: Session) -> None:
        CategoryRepository(db_session).save(_make_category("c1", "Science"))
        repository = StudySessionRepository(db_session)
        repository.save(_make_session("s1"))
        flashcards = FlashcardRepository(db_session)
        flashcards.save(
            Flashcard(
                id=FlashcardId("f1"),
                study_session_id=StudySessionId("s1"),
                question="Q",
                answer="A",
            )
        )

        repository.delete_by_id(StudySessionId("s1"))

        assert repository.exists_by_id(StudySessionId("s1")) is False
        assert flashcards.exists_by_id(FlashcardId("f1")) is False
