# AGPL-3.0 License

import logging
import os
import sys
from enum import Enum

from loguru import logger


class LoggingFormat(str, Enum):
    CONSOLE = "CONSOLE"
    JSON = "JSON"


def setup_logger(level: str = "INFO", fmt: LoggingFormat = LoggingFormat.CONSOLE):
    level: int = logging.getLevelName(level.upper())
    if type(level) is not int:
        level = logging.INFO

    logger.remove(None)
    if fmt == LoggingFormat.JSON and os.getenv("LOG_SANE", "0").lower() == "0":
        # one serialized record per line for CI log collectors
        logger.add(
            sys.stdout,
            level=level,
            format="{message}",
            colorize=False,
            serialize=True,
        )
    else:
        logger.add(sys.stdout, level=level, colorize=True)

    return logger


def get_logger(*args, **kwargs):
    return logger
