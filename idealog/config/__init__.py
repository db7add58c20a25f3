"""
Configuration module.

Handles environment variables and session defaults.
"""

from idealog.config.config import (
    APP_ENV,
    DEBUG,
    DEFAULT_VIEW,
    DEFAULT_SORT,
    LOAD_SAMPLE_IDEAS,
    ACTIVITY_LOG_LIMIT,
    WEB_HOST,
    WEB_PORT,
    is_production,
    is_development,
    validate_config,
    print_config_summary,
)

__all__ = [
    "APP_ENV",
    "DEBUG",
    "DEFAULT_VIEW",
    "DEFAULT_SORT",
    "LOAD_SAMPLE_IDEAS",
    "ACTIVITY_LOG_LIMIT",
    "WEB_HOST",
    "WEB_PORT",
    "is_production",
    "is_development",
    "validate_config",
    "print_config_summary",
]
