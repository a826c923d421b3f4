"""Application settings and configuration."""

from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    """Read a boolean environment variable ("true"/"false")."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class FilterConfig:
    """Filter state configuration settings."""

    # Name of the filter sub-map inside the table params
    state_key: str = field(
        default_factory=lambda: os.getenv("TABLE_FILTERS_STATE_KEY", "filters")
    )
    # Emit Select filters whose selection is null (wire-compatible default)
    emit_empty_select: bool = field(
        default_factory=lambda: _env_flag("TABLE_FILTERS_EMIT_EMPTY_SELECT", "true")
    )
    # Prefix used when flattening the wire map into a query string
    query_prefix: str = field(
        default_factory=lambda: os.getenv("TABLE_FILTERS_QUERY_PREFIX", "filters")
    )


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Table Filters"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@dataclass
class Config:
    """Main configuration container."""

    filters: FilterConfig = field(default_factory=FilterConfig)
    app: AppConfig = field(default_factory=AppConfig)


# Global config instance
config = Config()
