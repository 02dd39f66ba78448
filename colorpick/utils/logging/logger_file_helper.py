"""Module: logger_file_helper.py

Author: Michael Economou
Date: 2026-10-18

Attach rotating file handlers to a logger.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorpick.config import (
    LOG_DATE_FORMAT,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    LOG_FORMAT,
)


def add_file_handler(
    logger: logging.Logger,
    log_path: str | Path,
    level: int = logging.INFO,
    max_bytes: int = LOG_FILE_MAX_BYTES,
    backup_count: int = LOG_FILE_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Attach a rotating file handler to a logger.

    Args:
        logger: The logger to attach the handler to
        log_path: Path to the log file
        level: Logging level for this file handler
        max_bytes: Maximum file size before rotating
        backup_count: Number of backup files to keep

    Returns:
        The attached handler

    """
    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    logger.addHandler(file_handler)
    return file_handler
