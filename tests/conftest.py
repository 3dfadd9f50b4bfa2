"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from flashdeck import models
from flashdeck.config import Settings
from flashdeck.database import Base, create_database_engine, get_db
from flashdeck.main import create_app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine; foreign keys are enforced as in production
test_engine = create_database_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

app = create_app(Settings(DATABASE_URL=TEST_DATABASE_URL, ENVIRONMENT="test"))

SEEDED_CATEGORY_NAMES = [
    "Zoology",
    "Biology",
    "Applied Mathematics",
    "Web Design",
    "Business",
    "Psychology",
    "Calculus",
    "Physics",
    "Chemistry",
    "Nursing",
    "Discrete Math",
    "History",
    "Drama",
    "Engineering",
]


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
            db_session.commit()
        except Exception:
            db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_category(db_session: Session) -> models.Category:
    """Create a category."""
    category = models.Category(id="c1", name="Science")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def test_study_session(db_session: Session, test_category: models.Category) -> models.StudySession:
    """Create a study session in the test category."""
    session = models.StudySession(id="s1", category_id=test_category.id, name="Thermo")
    db_session.add(session)
    db_session.commit()
    db_session.refresh(session)
    return session


@pytest.fixture
def test_flashcard(
    db_session: Session, test_study_session: models.StudySession
) -> models.Flashcard:
    """Create a flashcard in the test study session."""
    flashcard = models.Flashcard(
        id="f1",
        study_session_id=test_study_session.id,
        question="What is entropy?",
        answer="A measure of disorder",
    )
    db_session.add(flashcard)
    db_session.commit()
    db_session.refresh(flashcard)
    return flashcard


@pytest.fixture
def seeded_categories(db_session: Session) -> list[models.Category]:
    """Create the fourteen seeded categories, in no particular order."""
    categories = [
        models.Category(id=f"seed-{index}", name=name)
        for index, name in enumerate(SEEDED_CATEGORY_NAMES)
    ]
    db_session.add_all(categories)
    db_session.commit()
    return categories
