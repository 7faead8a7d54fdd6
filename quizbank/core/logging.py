"""Logging setup for command-line entry points."""
import logging
import sys


def configure_logging(log_level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=log_level.upper(),
    )
