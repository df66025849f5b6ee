"""
Runner for the spendlog ledger.

This module handles configuration loading, logging setup, and opening the
ledger at startup.
"""

import logging
import sys
from decimal import Decimal
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from spendlog.config import (
    LOG_FILE,
    LOG_FORMAT,
    ensure_directories,
    get_log_level,
)
from spendlog.db import ExpenseLedger
from spendlog.exceptions import StorageUnavailable
from spendlog.models import TimeWindow

logger = logging.getLogger(__name__)


def load_environment(env_path: Optional[Path] = None) -> bool:
    """
    Load a .env file if it exists.

    Returns:
        True if a file was loaded
    """
    env_path = env_path or Path(__file__).parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        logger.info(f"Loaded environment from {env_path}")
        return True

    logger.debug(f".env file not found at {env_path}")
    return False


def configure_logging():
    """Configure root logging to the log file and stdout."""
    ensure_directories()
    logging.basicConfig(
        level=get_log_level(),
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(LOG_FILE),
            logging.StreamHandler(sys.stdout),
        ],
    )


def open_ledger(db_path: Optional[Path] = None) -> ExpenseLedger:
    """
    Open the ledger, creating its table if needed.

    Raises:
        StorageUnavailable: If the database cannot be opened. Startup
            cannot continue without a usable table.
    """
    try:
        ledger = ExpenseLedger(db_path)
    except StorageUnavailable as e:
        logger.critical(f"Failed to open expense ledger: {e}", exc_info=True)
        raise

    logger.info(f"Expense ledger ready ({ledger.expenses.count()} expenses)")
    return ledger


def format_amount(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def print_report(ledger: ExpenseLedger):
    """Print the total and category breakdown for every window."""
    for window in TimeWindow:
        view = ledger.load_view(window)
        print(f"Total Spending ({window.label}): {format_amount(view.total)}")
        print(f"By Category ({window.label}):")
        for category, total in view.by_category.items():
            print(f"  {category}: {format_amount(total)}")
        print("")


def run():
    """Open the configured ledger and print its spending report."""
    load_environment()
    configure_logging()

    try:
        ledger = open_ledger()
    except StorageUnavailable as e:
        print(f"\nError: could not open the expense database: {e}")
        print("Check spendlog.log for more details.")
        sys.exit(1)

    print_report(ledger)


if __name__ == "__main__":
    run()
