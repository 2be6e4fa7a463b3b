"""
Logging utilities for WiFi Grader
"""

import functools
import logging
import logging.handlers
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from wifi_grader.config.settings import LoggingSettings

ROOT_LOGGER_NAME = "wifi_grader"


def configure_logging(settings: Optional[LoggingSettings] = None,
                      console: Optional[Console] = None) -> logging.Logger:
    """Configure the package logger from logging settings.

    Console output goes through a RichHandler on stderr so that JSON written
    to stdout stays clean. File output rotates by size.
    """
    settings = settings or LoggingSettings()
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Reconfiguring replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(settings.level)
    logger.propagate = False

    if settings.console_enabled:
        console_handler = RichHandler(
            console=console or Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(console_handler)

    if settings.file_enabled:
        settings.log_directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            settings.log_directory / "wifi_grader.log",
            maxBytes=settings.max_file_size_mb * 1024 * 1024,
            backupCount=settings.backup_count,
        )
        file_handler.setFormatter(logging.Formatter(settings.format))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def log_performance(func):
    """Decorator to log function performance"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.performance")
        start_time = datetime.now()
        try:
            result = func(*args, **kwargs)
            duration = (datetime.now() - start_time).total_seconds()
            logger.info(f"{func.__name__} completed in {duration:.3f} seconds")
            return result
        except Exception as e:
            duration = (datetime.now() - start_time).total_seconds()
            logger.error(f"{func.__name__} failed after {duration:.3f} seconds: {e}")
            raise
    return wrapper
