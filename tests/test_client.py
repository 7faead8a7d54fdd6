from __future__ import annotations

import importlib
import logging
from unittest.mock import MagicMock, patch

import pytest

from quizbank.db import client
from quizbank.db.client import HANDLE_SLOT, get_or_create_handle, log_levels
from quizbank.db.registry import ProcessScope, process_scope


class FakeFactory:
    def __init__(self):
        self.calls: list[list[str]] = []

    def __call__(self, log):
        self.calls.append(log)
        return object()


@pytest.fixture
def factory():
    return FakeFactory()


@pytest.fixture
def reloadable_client():
    """Hand out the client module and restore its engine after reload tests."""
    original = client.engine
    saved = process_scope.pop(HANDLE_SLOT)
    yield client
    process_scope.set(HANDLE_SLOT, original)
    importlib.reload(client)
    if saved is None:
        process_scope.pop(HANDLE_SLOT)


@pytest.mark.parametrize(
    "app_env, expected",
    [
        ("development", ["query", "error", "warn"]),
        ("production", ["error"]),
        ("test", ["error"]),
        ("staging", ["error"]),
        ("", ["error"]),
        (None, ["error"]),
        ("Development", ["error"]),
    ],
)
def test_log_levels(app_env, expected):
    assert log_levels(app_env) == expected


@pytest.mark.parametrize("app_env", ["development", "test", "staging", ""])
def test_non_production_handle_is_kept_in_scope(factory, app_env):
    scope = ProcessScope()

    handle = get_or_create_handle(scope, app_env, factory=factory)

    assert scope.get(HANDLE_SLOT) is handle
    assert len(factory.calls) == 1


def test_unset_env_counts_as_non_production(factory, monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    scope = ProcessScope()

    handle = get_or_create_handle(scope, factory=factory)

    assert scope.get(HANDLE_SLOT) is handle
    assert factory.calls == [["error"]]


def test_production_handle_is_not_kept(factory):
    scope = ProcessScope()

    first = get_or_create_handle(scope, "production", factory=factory)
    second = get_or_create_handle(scope, "production", factory=factory)

    assert HANDLE_SLOT not in scope
    assert first is not second
    assert factory.calls == [["error"], ["error"]]


def test_scope_handle_is_reused_without_constructing(factory):
    scope = ProcessScope()
    existing = object()
    scope.set(HANDLE_SLOT, existing)

    assert get_or_create_handle(scope, "development", factory=factory) is existing
    assert get_or_create_handle(scope, "production", factory=factory) is existing
    assert factory.calls == []


def test_development_handle_gets_verbose_logging(factory):
    get_or_create_handle(ProcessScope(), "development", factory=factory)

    assert factory.calls == [["query", "error", "warn"]]


def test_env_flag_read_from_settings(factory, monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    scope = ProcessScope()

    get_or_create_handle(scope, factory=factory)

    assert HANDLE_SLOT not in scope


def test_create_handle_does_not_connect(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

    engine = client.create_handle(["query", "error", "warn"])

    assert engine.sync_engine.echo is True
    assert engine.sync_engine.url.drivername == "sqlite+aiosqlite"
    assert client.create_handle(["error"]).sync_engine.echo is False


def test_reload_in_development_reuses_engine(reloadable_client, monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")
    fake_create = MagicMock(side_effect=lambda *args, **kwargs: object())

    with patch("sqlalchemy.ext.asyncio.create_async_engine", fake_create):
        importlib.reload(reloadable_client)
        first = reloadable_client.engine
        importlib.reload(reloadable_client)
        second = reloadable_client.engine

    assert first is second
    assert process_scope.get(HANDLE_SLOT) is first
    assert fake_create.call_count == 1
    assert fake_create.call_args.kwargs["echo"] is True


def test_reload_in_production_builds_new_engine(reloadable_client, monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    fake_create = MagicMock(side_effect=lambda *args, **kwargs: object())

    with patch("sqlalchemy.ext.asyncio.create_async_engine", fake_create):
        importlib.reload(reloadable_client)
        first = reloadable_client.engine
        importlib.reload(reloadable_client)
        second = reloadable_client.engine

    assert first is not second
    assert HANDLE_SLOT not in process_scope
    assert fake_create.call_count == 2
    assert fake_create.call_args.kwargs["echo"] is False


def test_create_handle_leaves_logging_config_alone(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    sa_logger = logging.getLogger("sqlalchemy")
    monkeypatch.setattr(sa_logger, "level", logging.NOTSET)

    client.create_handle(["query", "error", "warn"])
    client.create_handle(["error"])

    assert sa_logger.level == logging.NOTSET
