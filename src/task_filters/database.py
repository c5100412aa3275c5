"""
SQLite connection handling for the filter store.

Owns the connection lifecycle and the schema of the filters table, and
translates sqlite3 errors into the package's storage exceptions.
"""

import os
import sqlite3
import logging
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

from .constants import DB_PATH, DEFAULT_DB_TIMEOUT, FILTERS_TABLE, ID_COLUMN
from .exceptions import StorageConstraintError, StorageUnavailableError

logger = logging.getLogger(__name__)

SCHEMA = f"""
    CREATE TABLE IF NOT EXISTS {FILTERS_TABLE} (
        {ID_COLUMN} INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT,
        sql TEXT,
        "values" TEXT,
        criterion TEXT,
        f_color INTEGER DEFAULT 0,
        f_icon INTEGER DEFAULT -1,
        f_order INTEGER NOT NULL DEFAULT -1
    );
"""


class FilterDatabase:
    """Connection factory for the database holding the filters table"""

    def __init__(self, db_path: Union[str, Path] = DB_PATH,
                 timeout: float = DEFAULT_DB_TIMEOUT,
                 foreign_keys: bool = True):
        self.db_path = Path(db_path)
        self.timeout = timeout
        self.foreign_keys = foreign_keys
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.initialize()

    @contextmanager
    def get_connection(self, operation: str = "query"):
        """
        Context manager for a single-transaction connection.

        Commits when the block finishes, rolls back when it raises and
        always closes the connection.

        Args:
            operation: Name of the operation, reported in constraint errors

        Raises:
            StorageConstraintError: If the engine rejects a row
            StorageUnavailableError: If the database cannot be opened or queried

        sqlite3.ProgrammingError and sqlite3.InterfaceError propagate unchanged.
        """
        try:
            conn = sqlite3.connect(str(self.db_path), timeout=self.timeout)
        except sqlite3.Error as e:
            logger.error(f"Cannot open database at {self.db_path}: {e}")
            raise StorageUnavailableError(str(self.db_path), e) from e

        conn.row_factory = sqlite3.Row
        try:
            if self.foreign_keys:
                conn.execute("PRAGMA foreign_keys = ON")
            yield conn
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            logger.error(f"Constraint violation during {operation}: {e}")
            raise StorageConstraintError(operation, e) from e
        except (sqlite3.ProgrammingError, sqlite3.InterfaceError):
            # Unbindable values and API misuse belong to the caller
            conn.rollback()
            raise
        except sqlite3.DatabaseError as e:
            conn.rollback()
            logger.error(f"Database error during {operation}: {e}")
            raise StorageUnavailableError(str(self.db_path), e) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def initialize(self):
        """Create the filters table if it does not exist"""
        logger.info(f"Initializing filter database at: {self.db_path}")
        with self.get_connection("initialize") as conn:
            conn.executescript(SCHEMA)

    def health_check(self) -> Dict[str, Any]:
        """Get database health information."""
        try:
            with self.get_connection("health_check") as conn:
                filter_count = conn.execute(f"SELECT COUNT(*) FROM {FILTERS_TABLE}").fetchone()[0]

            db_size = os.path.getsize(self.db_path) if self.db_path.exists() else 0

            return {
                'status': 'healthy',
                'database_path': str(self.db_path),
                'database_size_bytes': db_size,
                'total_filters': filter_count,
                'checked_at': datetime.now().isoformat()
            }

        except StorageUnavailableError as e:
            return {
                'status': 'unhealthy',
                'database_path': str(self.db_path),
                'error': e.message,
                'checked_at': datetime.now().isoformat()
            }
