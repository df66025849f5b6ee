"""
Base repository module with connection management and schema initialization.

Provides the foundation for all database operations in the spendlog ledger.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Union

from spendlog.config import DB_TIMEOUT, DEFAULT_DB_PATH
from spendlog.exceptions import StorageUnavailable

logger = logging.getLogger(__name__)

EXPENSES_TABLE = "expenses"


class BaseRepository:
    """
    Base repository class with SQLite connection management.

    Owns the lifecycle of the expenses table: conditional creation on
    startup, and an explicit destructive reset.
    """

    def __init__(
        self, db_path: Optional[Union[Path, str]] = None, init_schema: bool = True
    ):
        """
        Initialize the base repository.

        Args:
            db_path: Path to the SQLite database file. Defaults to data/spendlog.db
            init_schema: Whether to ensure the schema on startup

        Raises:
            StorageUnavailable: If the database cannot be created or opened
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_DB_PATH
        self._ensure_db_directory()
        if init_schema:
            self.ensure_schema()

    def _ensure_db_directory(self):
        """Ensure the database directory exists."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Database directory ensured: {self.db_path.parent}")
        except OSError as e:
            logger.error(f"Failed to create database directory: {e}", exc_info=True)
            raise StorageUnavailable(
                f"Cannot create database directory {self.db_path.parent}"
            ) from e

    @contextmanager
    def _get_connection(self):
        """Context manager for database connections with proper error handling."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=DB_TIMEOUT)
            conn.row_factory = sqlite3.Row
            yield conn
            conn.commit()
        except sqlite3.OperationalError as e:
            logger.error(f"Database locked or operational error: {e}", exc_info=True)
            if conn:
                conn.rollback()
            raise StorageUnavailable(str(e)) from e
        except sqlite3.Error as e:
            logger.error(f"Database error: {e}", exc_info=True)
            if conn:
                conn.rollback()
            raise StorageUnavailable(str(e)) from e
        except Exception:
            if conn:
                conn.rollback()
            raise
        finally:
            if conn:
                conn.close()

    def _create_tables(self, conn):
        """Create the expenses table and its indexes if they are missing."""
        conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {EXPENSES_TABLE} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                amount REAL NOT NULL CHECK(amount > 0),
                category TEXT NOT NULL CHECK(length(trim(category)) > 0),
                note TEXT,
                date TEXT NOT NULL
            )
        """)

        conn.execute(f"""
            CREATE INDEX IF NOT EXISTS idx_expenses_date
            ON {EXPENSES_TABLE}(date)
        """)

    def ensure_schema(self):
        """
        Create the expenses table if it does not exist.

        Existing data is always kept.
        """
        with self._get_connection() as conn:
            self._create_tables(conn)
            logger.debug(f"Expense schema ensured at {self.db_path}")

    def reset_schema(self):
        """
        Drop and recreate the expenses table.

        This permanently deletes every expense and restarts id assignment.
        """
        with self._get_connection() as conn:
            # Dropping the table also clears its sqlite_sequence row
            conn.execute(f"DROP TABLE IF EXISTS {EXPENSES_TABLE}")
            self._create_tables(conn)
            logger.warning(f"Expense table reset at {self.db_path}")
