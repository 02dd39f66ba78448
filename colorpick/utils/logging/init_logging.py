"""Module: init_logging.py

Author: Michael Economou
Date: 2026-10-18

Single entry point to initialize file logging for the application.
"""

import logging
from pathlib import Path

from colorpick.utils.logging.logger_file_helper import add_file_handler
from colorpick.utils.logging.logger_factory import get_cached_logger


def init_logging(app_name: str, logs_dir: str | Path) -> logging.Logger:
    """Add rotating activity and error log files to the package logger.

    Args:
        app_name: Base name for log files (e.g. 'colorpick')
        logs_dir: Directory receiving the log files

    Returns:
        The package logger the handlers were attached to

    """
    logger = get_cached_logger(app_name)
    logs_dir = Path(logs_dir)

    add_file_handler(logger, logs_dir / f"{app_name}_activity.log", level=logging.INFO)
    add_file_handler(logger, logs_dir / f"{app_name}_errors.log", level=logging.ERROR)

    logger.debug("[init_logging] File logging enabled in %s", logs_dir, extra={"dev_only": True})
    return logger
