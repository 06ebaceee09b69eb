# -*- coding: utf-8 -*-
"""
Logging configuration.

The engine logs through one application logger ("mtcit"); every module asks
for a child logger with get_logger(__name__). Output:
- rotating UTF-8 file at Config.LOG_PATH (DEBUG), unless LOG_TO_FILE is off
- stdout at Config.LOG_LEVEL (INFO by default)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

APP_LOGGER_NAME = "mtcit"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

# Set by setup_logger
_logger: Optional[logging.Logger] = None


def _file_handler(config) -> logging.Handler:
    config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        config.LOG_PATH,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _console_handler(level: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger(log_to_file: Optional[bool] = None) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        log_to_file: Override Config.LOG_TO_FILE (hosts that only want
            console output pass False)
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    if log_to_file is None:
        log_to_file = Config.LOG_TO_FILE

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.handlers.clear()

    if log_to_file:
        logger.addHandler(_file_handler(Config))
    logger.addHandler(_console_handler(Config.LOG_LEVEL))

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
