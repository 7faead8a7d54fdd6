"""SQLAlchemy declarative base and model imports for Alembic."""
from quizbank.db.session import Base

# Import all models so Alembic can see them
from quizbank.models.progress import UserProgress  # noqa: F401
from quizbank.models.question import Question  # noqa: F401
from quizbank.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Question", "UserProgress"]
