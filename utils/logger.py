# -*- coding: utf-8 -*-
"""
Logging configuration for the wizard.

The application logger ("sa_wizard") writes DEBUG and above to a rotating
file under Config.LOGS_DIR and Config.LOG_LEVEL and above to stdout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

APP_LOGGER_NAME = "sa_wizard"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _create_file_handler(config) -> Optional[logging.Handler]:
    """Rotating file handler, or None when the logs directory is not writable."""
    try:
        config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            config.LOG_PATH,
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
    except OSError as e:
        sys.stderr.write(f"Log file unavailable ({e}); logging to console only\n")
        return None

    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    return handler


def setup_logger() -> logging.Logger:
    """
    Setup application logger with file and console handlers.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    file_handler = _create_file_handler(Config)
    if file_handler:
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
