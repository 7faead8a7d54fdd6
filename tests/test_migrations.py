from __future__ import annotations

from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic import command
from alembic.config import Config

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def alembic_cfg(tmp_path, monkeypatch):
    db_path = tmp_path / "migrated.db"
    monkeypatch.setenv("ALEMBIC_DATABASE_URL", f"sqlite:///{db_path}")
    # No ini file: keeps alembic's fileConfig from replacing the test logging setup.
    cfg = Config()
    cfg.set_main_option("script_location", str(REPO_ROOT / "alembic"))
    return cfg, sa.create_engine(f"sqlite:///{db_path}")


def test_upgrade_creates_tables_with_constraints(alembic_cfg):
    cfg, sync_engine = alembic_cfg

    command.upgrade(cfg, "head")

    inspector = sa.inspect(sync_engine)
    assert {"users", "questions", "user_progress"} <= set(inspector.get_table_names())
    assert any(ix["unique"] and ix["column_names"] == ["email"] for ix in inspector.get_indexes("users"))
    assert {"topic", "question_text"} in [
        set(uc["column_names"]) for uc in inspector.get_unique_constraints("questions")
    ]
    assert {"user_id", "topic"} in [
        set(uc["column_names"]) for uc in inspector.get_unique_constraints("user_progress")
    ]
    sync_engine.dispose()


def test_migration_matches_models(alembic_cfg):
    from quizbank.db.base import Base

    cfg, sync_engine = alembic_cfg
    command.upgrade(cfg, "head")

    inspector = sa.inspect(sync_engine)
    for table in Base.metadata.sorted_tables:
        migrated = {c["name"] for c in inspector.get_columns(table.name)}
        assert migrated == set(table.columns.keys()), table.name
    sync_engine.dispose()


def test_downgrade_drops_tables(alembic_cfg):
    cfg, sync_engine = alembic_cfg
    command.upgrade(cfg, "head")

    command.downgrade(cfg, "base")

    assert set(sa.inspect(sync_engine).get_table_names()) <= {"alembic_version"}
    sync_engine.dispose()
