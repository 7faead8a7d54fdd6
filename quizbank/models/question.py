"""Question model: one multiple-choice item with four labeled options."""
from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.sql import func

from quizbank.db.session import Base


class Question(Base):
    __tablename__ = "questions"
    __table_args__ = (
        # backs skip-duplicates inserts of the catalog
        UniqueConstraint("topic", "question_text", name="uq_questions_topic_text"),
        CheckConstraint("correct_answer IN ('A', 'B', 'C', 'D')", name="ck_questions_correct_answer"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    question_text = Column(Text, nullable=False)
    question_latex = Column(Text, nullable=True)  # rendering markup variant of question_text
    option_a = Column(String(255), nullable=False)
    option_b = Column(String(255), nullable=False)
    option_c = Column(String(255), nullable=False)
    option_d = Column(String(255), nullable=False)
    correct_answer = Column(String(1), nullable=False)  # A | B | C | D
    topic = Column(String(32), nullable=False, index=True)  # algebra, geometry, statistics, probability, number_systems
    difficulty_level = Column(Integer, nullable=False, default=1)
    explanation = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
