from __future__ import annotations

import os

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

# Settings are read when quizbank.db.client is first imported. Nothing connects
# at import time, but keep the default database out of the working tree.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def engine(tmp_path):
    from quizbank.db.session import init_models

    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'quiz.db'}")
    await init_models(eng)
    yield eng
    await eng.dispose()
