"""Configuration module for Table Filters."""

from .settings import config, FilterConfig, AppConfig, Config
from .constants import (
    # Boolean toggles
    BOOLEAN_ON,
    BOOLEAN_OFF,
    # Wire keys
    RANGE_MIN,
    RANGE_MAX,
    SELECT_ID,
    MULTI_SELECTED,
    BRACKET_PREFIX,
)
from .logging_config import setup_logging, get_logger

__all__ = [
    # Settings
    "config",
    "FilterConfig",
    "AppConfig",
    "Config",
    # Constants
    "BOOLEAN_ON",
    "BOOLEAN_OFF",
    "RANGE_MIN",
    "RANGE_MAX",
    "SELECT_ID",
    "MULTI_SELECTED",
    "BRACKET_PREFIX",
    # Logging
    "setup_logging",
    "get_logger",
]
