# AGPL-3.0 License

import logging
import sys
from enum import Enum

from loguru import logger


class LoggingFormat(str, Enum):
    CONSOLE = "CONSOLE"
    JSON = "JSON"


def setup_logger(level: str = "INFO", fmt: LoggingFormat = LoggingFormat.CONSOLE):
    """
    Configure the shared loguru logger with a single stdout sink.

    Args:
        level: Log level name (falls back to INFO when unknown)
        fmt: CONSOLE for colored human-readable lines, JSON for serialized records
            (falls back to CONSOLE when unknown)
    """
    level: int = logging.getLevelName(str(level).upper())
    if type(level) is not int:
        level = logging.INFO

    if not isinstance(fmt, LoggingFormat):
        try:
            fmt = LoggingFormat(str(fmt).upper())
        except ValueError:
            fmt = LoggingFormat.CONSOLE

    logger.remove(None)
    if fmt == LoggingFormat.JSON:
        logger.add(
            sys.stdout,
            level=level,
            format="{message}",
            colorize=False,
            serialize=True,
        )
    else:  # does not print the 'extra' fields
        logger.add(sys.stdout, level=level, colorize=True)

    return logger


def get_logger(*args, **kwargs):
    return logger
