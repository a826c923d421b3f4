"""Logging configuration for Table Filters."""

import logging
import sys
from pathlib import Path
from typing import Optional

from .settings import config

ROOT_LOGGER_NAME = "table_filters"


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure logging for the filter engine.

    Args:
        log_level: Logging level (DEBUG, INFO, ...); defaults to LOG_LEVEL
        log_file: Optional path to log file
        log_to_console: Whether to also log to console

    Returns:
        Configured logger instance
    """
    level = getattr(logging, (log_level or config.app.log_level).upper())

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (will be prefixed with 'table_filters.')

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
