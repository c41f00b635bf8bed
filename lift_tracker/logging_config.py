"""Logging setup."""

import logging

from lift_tracker.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger to write to stderr."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
