# SPDX-License-Identifier: MIT

import logging
from functools import lru_cache

from rich.console import Console
from rich.logging import RichHandler

from planning.configuration import DEFAULT_LOG_LEVEL, LOG_LEVELS

_LOG_FORMAT = "%(name)s | %(message)s"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Attach a rich handler on stderr to the package logger, once.

    An unknown level falls back to WARNING with a warning instead of failing
    at startup.
    """
    logger = logging.getLogger("planning")

    known_level = str(level).upper() in LOG_LEVELS
    logger.setLevel(str(level).upper() if known_level else DEFAULT_LOG_LEVEL)

    if not logger.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            log_time_format="[%X]",
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)

    if not known_level:
        logger.warning(
            "Unknown log level %r in configuration, using %s", level, DEFAULT_LOG_LEVEL
        )


@lru_cache(maxsize=128)
def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a module.

    Usage:
        from planning.logger import get_logger
        logger = get_logger(__name__)
        logger.info("message")
    """
    return logging.getLogger(name)
