"""
Configuration module for Idea Log.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of idealog/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", or "production"
APP_ENV: str = os.getenv("APP_ENV", "development")

# Flask debug mode and verbose CLI output
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"


# =============================================================================
# Session Defaults
# =============================================================================

# View shown when a session starts: "all", "active", or "archived"
DEFAULT_VIEW: str = os.getenv("DEFAULT_VIEW", "active")

# Sort order when a session starts: "newest", "oldest", or "title"
DEFAULT_SORT: str = os.getenv("DEFAULT_SORT", "newest")

# Seed new sessions with the bundled sample ideas
LOAD_SAMPLE_IDEAS: bool = os.getenv("LOAD_SAMPLE_IDEAS", "true").lower() == "true"

# Maximum number of activity log entries kept per session
ACTIVITY_LOG_LIMIT: int = int(os.getenv("ACTIVITY_LOG_LIMIT", "200"))


# =============================================================================
# Web Dashboard
# =============================================================================

WEB_HOST: str = os.getenv("WEB_HOST", "127.0.0.1")
WEB_PORT: int = int(os.getenv("WEB_PORT", "5001"))


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def is_development() -> bool:
    """Check if running in development environment."""
    return APP_ENV == "development"


def validate_config() -> list[str]:
    """
    Validate configuration values.

    Returns:
        List of invalid configuration keys with reasons (empty if all valid).
    """
    # Imported here so the config module stays importable on its own
    from idealog.state import SORT_KEYS, VIEWS

    errors = []

    if DEFAULT_VIEW not in VIEWS:
        errors.append(f"DEFAULT_VIEW must be one of {', '.join(VIEWS)}, got {DEFAULT_VIEW!r}")

    if DEFAULT_SORT not in SORT_KEYS:
        errors.append(f"DEFAULT_SORT must be one of {', '.join(SORT_KEYS)}, got {DEFAULT_SORT!r}")

    if ACTIVITY_LOG_LIMIT < 1:
        errors.append("ACTIVITY_LOG_LIMIT must be at least 1")

    if not (1 <= WEB_PORT <= 65535):
        errors.append(f"WEB_PORT must be between 1 and 65535, got {WEB_PORT}")

    if is_production() and DEBUG:
        errors.append("DEBUG must be disabled in production")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  DEFAULT_VIEW: {DEFAULT_VIEW}")
    print(f"  DEFAULT_SORT: {DEFAULT_SORT}")
    print(f"  LOAD_SAMPLE_IDEAS: {LOAD_SAMPLE_IDEAS}")
    print(f"  ACTIVITY_LOG_LIMIT: {ACTIVITY_LOG_LIMIT}")
    print(f"  WEB_HOST: {WEB_HOST}")
    print(f"  WEB_PORT: {WEB_PORT}")
