# MIT License (see LICENSE)
"""
Logging setup for applications embedding the simulation.

Library modules only create loggers with logging.getLogger(__name__);
an application calls setup_logging() once at startup.
"""
from __future__ import annotations
import logging
import logging.handlers
import os

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the root logger with a console handler and an optional file.

    Existing root handlers are removed first, so calling this twice does
    not duplicate output.

    Args:
        level: Level name, e.g. "DEBUG" or "INFO".
        log_file: When given, also log to this file, rotating at 1 MiB
            with 5 backups. Its directory is created if missing.
        fmt: logging.Formatter format string.

    Returns:
        The root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(fmt)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at %s (file=%s)", level.upper(), log_file)
    return logger
