"""Seed runner entry point.

Usage:
    python -m quizbank.seed [--create-tables]
"""
import argparse
import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncEngine

from quizbank.core.config import get_settings
from quizbank.core.logging import configure_logging
from quizbank.db.session import engine, init_models
from quizbank.services.seeding import format_summary, seed

logger = logging.getLogger(__name__)


async def run(bind: AsyncEngine, *, create_tables: bool = False) -> int:
    """Seed ``bind`` and return the process exit status; always disposes ``bind``."""
    try:
        if create_tables:
            await init_models(bind)
        summary = await seed(bind)
        for line in format_summary(summary):
            print(line)
        print("\nDatabase seeding completed successfully!")
        return 0
    except Exception:
        logger.exception("Error seeding database")
        return 1
    finally:
        await bind.dispose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the quiz database with test users, questions and progress.")
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables before seeding.")
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_level)
    sys.exit(asyncio.run(run(engine, create_tables=args.create_tables)))


if __name__ == "__main__":
    main()
