from quizbank.services.catalog import TOPICS, load_catalog
from quizbank.services.seeding import seed

__all__ = ["TOPICS", "load_catalog", "seed"]
