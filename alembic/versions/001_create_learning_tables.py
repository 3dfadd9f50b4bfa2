"""Create categories, study_sessions and flashcards tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the learning tables."""
    op.create_table(
        "categories",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "study_sessions",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("category_id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_study_sessions_category_id"), "study_sessions", ["category_id"], unique=False
    )
    op.create_index(op.f("ix_study_sessions_name"), "study_sessions", ["name"], unique=False)
    op.create_table(
        "flashcards",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("study_session_id", sa.String(64), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["study_session_id"], ["study_sessions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_flashcards_study_session_id"), "flashcards", ["study_session_id"], unique=False
    )


def downgrade() -> None:
    """Drop the learning tables."""
    op.drop_index(op.f("ix_flashcards_study_session_id"), table_name="flashcards")
    op.drop_table("flashcards")
    op.drop_index(op.f("ix_study_sessions_name"), table_name="study_sessions")
    op.drop_index(op.f("ix_study_sessions_category_id"), table_name="study_sessions")
    op.drop_table("study_sessions")
    op.drop_table("categories")
