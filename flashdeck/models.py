"""Database models."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flashdeck.database import Base

ID_LENGTH = 64


class Category(Base):
    """Category model; names are unique."""

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    study_sessions: Mapped[list["StudySession"]] = relationship(
        back_populates="category", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of Category."""
        return f"<Category(id={self.id!r}, name={self.name!r})>"


class StudySession(Base):
    """Study session model, owned by a category."""

    __tablename__ = "study_sessions"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    category_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("categories.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), index=True, nullable=False)

    category: Mapped[Category] = relationship(back_populates="study_sessions")
    flashcards: Mapped[list["Flashcard"]] = relationship(
        back_populates="study_session", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of StudySession."""
        return f"<StudySession(id={self.id!r}, name={self.name!r})>"


class Flashcard(Base):
    """Flashcard model, owned by a study session."""

    __tablename__ = "flashcards"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    study_session_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("study_sessions.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)

    study_session: Mapped[StudySession] = relationship(back_populates="flashcards")

    def __repr__(self) -> str:
        """String representation of Flashcard."""
        return f"<Flashcard(id={self.id!r}, question={self.question[:50]!r})>"
