"""Initial tables: users, questions, user_progress.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(32), nullable=False, server_default="user"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("question_latex", sa.Text(), nullable=True),
        sa.Column("option_a", sa.String(255), nullable=False),
        sa.Column("option_b", sa.String(255), nullable=False),
        sa.Column("option_c", sa.String(255), nullable=False),
        sa.Column("option_d", sa.String(255), nullable=False),
        sa.Column("correct_answer", sa.String(1), nullable=False),
        sa.Column("topic", sa.String(32), nullable=False),
        sa.Column("difficulty_level", sa.Integer(), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("correct_answer IN ('A', 'B', 'C', 'D')", name="ck_questions_correct_answer"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("topic", "question_text", name="uq_questions_topic_text"),
    )
    op.create_index(op.f("ix_questions_topic"), "questions", ["topic"], unique=False)

    op.create_table(
        "user_progress",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("topic", sa.String(32), nullable=False),
        sa.Column("questions_attempted", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("questions_correct", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_practiced", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "topic", name="uq_user_progress_user_topic"),
    )
    op.create_index(op.f("ix_user_progress_user_id"), "user_progress", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_user_progress_user_id"), table_name="user_progress")
    op.drop_table("user_progress")
    op.drop_index(op.f("ix_questions_topic"), table_name="questions")
    op.drop_table("questions")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
