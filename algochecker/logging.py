"""Package-wide logging for AlgoChecker.

Every module logs through `get_logger(__name__)`; records flow to the single
handler installed on the ``algochecker`` logger. The initial level is INFO
unless ``ALGOCHECKER_LOG_LEVEL`` names another one (e.g. ``DEBUG`` to trace
every trial of a check run).
"""

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

ROOT_LOGGER_NAME = "algochecker"
LOG_LEVEL_ENV = "ALGOCHECKER_LOG_LEVEL"

_configured = False


def _level_from_env(default: int) -> int:
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the package handler on the ``algochecker`` logger once.

    Later calls do nothing until `reset_logging()`.

    Args:
        level: Level to use; defaults to ``ALGOCHECKER_LOG_LEVEL`` or INFO.
        format_string: Record format (timestamp, logger, level, message
            by default).
        handler: Destination; defaults to a stdout StreamHandler.
    """
    global _configured
    if _configured:
        return

    if level is None:
        level = _level_from_env(logging.INFO)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )
    package_logger.addHandler(handler)
    # pytest's caplog listens on the root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the module logger ``name``, inheriting the package level."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the level of the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


@contextmanager
def debug_logging() -> Iterator[None]:
    """Log at DEBUG inside the block, then restore the previous level."""
    setup_root_logger()
    previous = logging.getLogger(ROOT_LOGGER_NAME).level
    set_global_log_level(logging.DEBUG)
    try:
        yield
    finally:
        set_global_log_level(previous)


def reset_logging() -> None:
    """Drop the package handler and level (mainly for tests)."""
    global _configured
    _configured = False
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
