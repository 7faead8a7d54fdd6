from quizbank.models.user import User
from quizbank.models.question import Question
from quizbank.models.progress import UserProgress

__all__ = ["User", "Question", "UserProgress"]
