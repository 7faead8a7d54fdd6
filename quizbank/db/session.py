"""Session factory and declarative base bound to the shared engine."""
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base

from quizbank.db.client import engine

Base = declarative_base()


def session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, expire_on_commit=False, class_=AsyncSession)


AsyncSessionLocal = session_factory(engine)


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create all tables that don't exist yet (dev and tests; use Alembic elsewhere)."""
    import quizbank.db.base  # noqa: F401  registers models on Base.metadata

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
