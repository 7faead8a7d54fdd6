"""Seed the store with test users, the question catalog and sample progress.

Inserts rely on the store's own conflict handling (upsert / ON CONFLICT DO
NOTHING), so re-running the seed never duplicates rows and never needs a
read-before-write.
"""
import asyncio
import logging
import random
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from quizbank.core.security import hash_password
from quizbank.db.session import session_factory
from quizbank.models.progress import UserProgress
from quizbank.models.question import Question
from quizbank.models.user import User
from quizbank.schemas.question import QuestionSchema
from quizbank.schemas.seed import SeedSummarySchema
from quizbank.services.catalog import TOPICS, load_catalog

logger = logging.getLogger(__name__)

TEST_PASSWORD = "Test123!"
PASSWORD_ROUNDS = 10

TEST_USERS = [
    {"email": "test1@example.com", "first_name": "Test", "last_name": "User One", "role": "user"},
    {"email": "test2@example.com", "first_name": "Test", "last_name": "User Two", "role": "user"},
]

# Sample progress: attempted in [0, 20), correct in [0, 15), practiced within the last week.
# correct is drawn independently of attempted and may exceed it.
MAX_ATTEMPTED = 20
MAX_CORRECT = 15
PRACTICE_WINDOW = timedelta(days=7)


class UnsupportedDialectError(ValueError):
    """The store has no native insert-or-skip / upsert we know how to emit."""


def dialect_insert(dialect_name: str):
    """Return the dialect's ``insert`` construct with ON CONFLICT support."""
    if dialect_name == "sqlite":
        return sqlite.insert
    if dialect_name == "postgresql":
        return postgresql.insert
    raise UnsupportedDialectError(f"no native upsert support for dialect {dialect_name!r}")


async def upsert_user(
    sessionmaker: async_sessionmaker[AsyncSession],
    dialect_name: str,
    values: dict[str, Any],
) -> Row:
    """Create the user unless the email exists; an existing row is left as is.

    Runs in its own session so several upserts can be awaited together.
    Returns ``(id, email)`` of the created or existing row.
    """
    table = User.__table__
    stmt = dialect_insert(dialect_name)(table).values(**values)
    # no-op update so RETURNING yields the existing row too
    stmt = stmt.on_conflict_do_update(
        index_elements=[table.c.email],
        set_={"email": stmt.excluded.email},
    ).returning(table.c.id, table.c.email)

    async with sessionmaker() as db:
        row = (await db.execute(stmt)).one()
        await db.commit()
    return row


async def insert_or_skip(db: AsyncSession, model, rows: list[dict[str, Any]]) -> int:
    """Bulk insert ``rows``, skipping those that hit a uniqueness constraint.

    Returns the number of rows actually inserted.
    """
    if not rows:
        return 0
    table = model.__table__
    stmt = (
        dialect_insert(db.get_bind().dialect.name)(table)
        .on_conflict_do_nothing()
        .returning(table.c.id)
    )
    result = await db.execute(stmt, rows)
    return len(result.all())


def build_progress_records(
    user_ids: Iterable[int],
    topics: Iterable[str],
    rng: random.Random,
    now: datetime,
) -> list[dict[str, Any]]:
    """One random progress row per (user, topic)."""
    window_ms = int(PRACTICE_WINDOW.total_seconds() * 1000)
    topics = list(topics)
    records = []
    for user_id in user_ids:
        for topic in topics:
            records.append(
                dict(
                    user_id=user_id,
                    topic=topic,
                    questions_attempted=rng.randrange(MAX_ATTEMPTED),
                    questions_correct=rng.randrange(MAX_CORRECT),
                    last_practiced=now - timedelta(milliseconds=rng.randrange(window_ms)),
                )
            )
    return records


def topic_breakdown(questions: Iterable[QuestionSchema]) -> dict[str, int]:
    """Question count per topic, in catalog order."""
    return dict(Counter(q.topic for q in questions))


def format_summary(summary: SeedSummarySchema) -> list[str]:
    lines = [
        "",
        "=== Seed Summary ===",
        f"Users: {summary.users} ({summary.users_created} new)",
        f"Questions: {summary.questions_inserted}",
        f"User Progress Records: {summary.progress_inserted}",
        "",
        "Topics covered:",
    ]
    lines.extend(f"  - {topic}: {count} questions" for topic, count in summary.topic_counts.items())
    return lines


async def _count_users(db: AsyncSession) -> int:
    return (await db.execute(select(func.count()).select_from(User))).scalar_one()


async def seed(
    engine: AsyncEngine,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> SeedSummarySchema:
    """Run every seeding step against ``engine`` and return what was written.

    Errors propagate; the caller owns the engine and disposes it.
    """
    rng = rng or random.Random()
    now = now or datetime.now(tz=timezone.utc)
    sessionmaker = session_factory(engine)
    dialect_name = engine.dialect.name

    logger.info("Starting database seed")
    password_hash = hash_password(TEST_PASSWORD, rounds=PASSWORD_ROUNDS)

    async with sessionmaker() as db:
        users_before = await _count_users(db)

    users = await asyncio.gather(
        *(upsert_user(sessionmaker, dialect_name, dict(u, hashed_password=password_hash)) for u in TEST_USERS)
    )

    async with sessionmaker() as db:
        users_created = await _count_users(db) - users_before
    logger.info("Upserted %d test users (%d new)", len(users), users_created)

    questions = load_catalog()
    async with sessionmaker() as db:
        questions_inserted = await insert_or_skip(db, Question, [q.model_dump() for q in questions])
        await db.commit()
    logger.info("Inserted %d of %d catalog questions", questions_inserted, len(questions))

    progress_rows = build_progress_records([u.id for u in users], TOPICS, rng, now)
    async with sessionmaker() as db:
        progress_inserted = await insert_or_skip(db, UserProgress, progress_rows)
        await db.commit()
    logger.info("Inserted %d user progress records", progress_inserted)

    return SeedSummarySchema(
        users=len(users),
        users_created=users_created,
        questions_inserted=questions_inserted,
        progress_inserted=progress_inserted,
        topic_counts=topic_breakdown(questions),
    )
