"""
Configuration module for spendlog.

Contains constants, settings, and configuration values used throughout the application.
"""

import os
from decimal import Decimal
from pathlib import Path

# Version
VERSION = "0.1.0"

# Application paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
LOG_DIR = PROJECT_ROOT / "logs"

# Database configuration
DEFAULT_DB_PATH = DATA_DIR / "spendlog.db"
DB_TIMEOUT = 10.0  # seconds

# Amount validation
MAX_AMOUNT = Decimal("999999999.99")

# Week boundaries (0 = Monday ... 6 = Sunday, as in date.weekday())
WEEKDAY_NAMES = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]
DEFAULT_WEEK_START = "sunday"

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = LOG_DIR / "spendlog.log"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Error messages
ERROR_MESSAGES = {
    "invalid_amount": "Amount must be a positive number.",
    "invalid_category": "Category is required.",
    "not_found": "The requested expense was not found.",
    "database_error": "Database error occurred. Please try again later.",
}


def ensure_directories():
    """Ensure required directories exist."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    LOG_DIR.mkdir(parents=True, exist_ok=True)


def get_db_path() -> Path:
    """Get the database path, honouring SPENDLOG_DB_PATH."""
    override = os.getenv("SPENDLOG_DB_PATH")
    if override:
        return Path(override).expanduser()
    return DEFAULT_DB_PATH


def get_week_start() -> int:
    """
    Get the configured first day of the week as a date.weekday() index.

    Unknown names fall back to Sunday.
    """
    name = os.getenv("SPENDLOG_WEEK_START", DEFAULT_WEEK_START).strip().lower()
    if name not in WEEKDAY_NAMES:
        name = DEFAULT_WEEK_START
    return WEEKDAY_NAMES.index(name)


def get_log_level():
    """Get the configured log level."""
    import logging

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(os.getenv("LOG_LEVEL", LOG_LEVEL).upper(), logging.INFO)
