"""Logging setup for the lifegrid command line."""

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the 'lifegrid' package logger.

    Diagnostics go to stderr so that stdout carries only rendered grids.
    Calling it again replaces the previous handlers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path that also receives the log

    Returns:
        The configured logger

    Raises:
        OSError: If log_file cannot be opened for writing
    """
    logger = logging.getLogger("lifegrid")

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(level)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized (level %s)", logging.getLevelName(level))
    return logger
