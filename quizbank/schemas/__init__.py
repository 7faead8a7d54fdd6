from quizbank.schemas.question import AnswerLabel, QuestionSchema, Topic
from quizbank.schemas.seed import SeedSummarySchema

__all__ = [
    "AnswerLabel",
    "QuestionSchema",
    "SeedSummarySchema",
    "Topic",
]
