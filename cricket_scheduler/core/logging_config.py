"""
Logging setup for the Cricket Match Scheduling System.
Engines log through module loggers from get_logger; the API configures the
root logger once with setup_logging.
"""

import logging
import sys

from cricket_scheduler.core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Server loggers that would otherwise repeat every request at INFO
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "fastapi")


def resolve_level(level_name: str):
    """Map a level name such as "debug" to its logging constant, or None if unknown."""
    level = logging.getLevelName(str(level_name).strip().upper())
    return level if isinstance(level, int) else None


def setup_logging(log_level: str = LOG_LEVEL) -> logging.Logger:
    """
    Send all scheduling logs to stdout at the configured level.

    Args:
        log_level: Level name, normally LOG_LEVEL from the environment

    Returns:
        The configured root logger
    """
    level = resolve_level(log_level)
    known = level is not None
    if not known:
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if not known:
        root_logger.warning(f"Unknown log level {log_level!r}, using INFO")

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
