"""Module: logger_helper.py

Author: Michael Economou
Date: 2026-10-18

Helpers for building named loggers with a UTF-8 console handler.

DevOnlyFilter hides records logged with extra={"dev_only": True} from the
console while still letting file handlers store them.
"""

import logging
import sys

from colorpick.config import LOG_CONSOLE_FORMAT, SHOW_DEV_ONLY_IN_CONSOLE


class DevOnlyFilter(logging.Filter):
    """Drop dev-only records unless SHOW_DEV_ONLY_IN_CONSOLE is enabled."""

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger, attaching a console handler to the package root once.

    Args:
        name: Logger name, usually the caller's __name__

    Returns:
        Configured logger instance

    """
    logger = logging.getLogger(name or __name__)

    root_name = logger.name.split(".", 1)[0]
    package_logger = logging.getLogger(root_name)
    if not package_logger.handlers:
        package_logger.setLevel(logging.DEBUG)
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.INFO)
        handler.addFilter(DevOnlyFilter())
        handler.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))

        try:
            handler.stream.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, ValueError):
            pass

        package_logger.addHandler(handler)

    return logger
