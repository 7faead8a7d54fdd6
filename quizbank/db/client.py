"""Database handle construction and process-wide reuse.

One ``AsyncEngine`` is shared by the whole application. Outside production the
engine is parked in the process scope so that reloading this module (dev
server hot reload) picks the same engine up again instead of opening a second
connection pool. Production processes never reload, so each one builds its
own engine and nothing is parked.

Creating the engine does not connect; the first query does.
"""
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from quizbank.core.config import get_settings
from quizbank.db.registry import ProcessScope, process_scope

HANDLE_SLOT = "quizbank.db.engine"

DEVELOPMENT_LOG = ["query", "error", "warn"]
DEFAULT_LOG = ["error"]


def log_levels(app_env: str | None) -> list[str]:
    """Return the handle's log levels for an environment flag value."""
    if app_env == "development":
        return list(DEVELOPMENT_LOG)
    return list(DEFAULT_LOG)


def create_handle(log: list[str]) -> AsyncEngine:
    """Build the engine; ``query`` in ``log`` turns on SQL echo.

    Errors and warnings reach the caller as exceptions and Python warnings
    whatever ``log`` says, so no logger is touched here.
    """
    return create_async_engine(
        get_settings().database_url,
        echo="query" in log,
        pool_pre_ping=True,
    )


def get_or_create_handle(
    scope: ProcessScope,
    app_env: str | None = None,
    factory: Callable[..., AsyncEngine] = create_handle,
) -> AsyncEngine:
    """Return the engine held in ``scope``, building it on first use.

    Any ``app_env`` other than exactly "production" (unset and empty included)
    leaves the engine in ``scope`` for the next caller.
    """
    if app_env is None:
        app_env = get_settings().app_env

    handle = scope.get(HANDLE_SLOT)
    if handle is None:
        handle = factory(log=log_levels(app_env))

    if app_env != "production":
        scope.set(HANDLE_SLOT, handle)
    return handle


engine = get_or_create_handle(process_scope)
