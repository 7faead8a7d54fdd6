"""Pydantic schema for the seed run summary."""
from pydantic import BaseModel


class SeedSummarySchema(BaseModel):
    users: int
    users_created: int
    questions_inserted: int
    progress_inserted: int
    topic_counts: dict[str, int]
