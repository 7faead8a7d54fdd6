"""Pydantic schemas for catalog questions."""
from typing import Literal

from pydantic import BaseModel, Field

Topic = Literal["algebra", "geometry", "statistics", "probability", "number_systems"]
AnswerLabel = Literal["A", "B", "C", "D"]


class QuestionSchema(BaseModel):
    question_text: str = Field(min_length=1)
    question_latex: str | None = None
    option_a: str = Field(min_length=1)
    option_b: str = Field(min_length=1)
    option_c: str = Field(min_length=1)
    option_d: str = Field(min_length=1)
    correct_answer: AnswerLabel
    topic: Topic
    difficulty_level: int = Field(ge=1, le=3)
    explanation: str = Field(min_length=1)
