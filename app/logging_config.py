"""Structured logging configuration."""

import logging
import sys
from typing import Optional, Union

from app.settings import log_level_from_env


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """Configure structured logging for the application.

    Without an explicit level, ARCHIVE_CHECKER_LOG_LEVEL is consulted and
    INFO is the fallback.
    """
    if level is None:
        level = log_level_from_env()
    if isinstance(level, str):
        level = logging.getLevelName(level)
        if not isinstance(level, int):
            level = logging.INFO

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Set library loggers to WARNING to reduce noise
    logging.getLogger("PyQt6").setLevel(logging.WARNING)
