"""Repository for saved filter data access."""

import logging
from typing import List, Optional

import pandas as pd

from .base import Repository
from .statements import COUNT, DELETE, EXISTS, GET_ALL, GET_BY_ID, GET_BY_NAME, INSERT, UPDATE
from ..constants import ID_COLUMN, MAX_SQLITE_INTEGER, MIN_SQLITE_INTEGER
from ..database import FilterDatabase
from ..models.domain import Filter

logger = logging.getLogger(__name__)

# Table columns renamed to Filter attribute names
COLUMN_NAMES = {ID_COLUMN: 'id', 'f_color': 'color', 'f_icon': 'icon', 'f_order': 'order'}


def _storable_id(filter_id) -> bool:
    """Whether filter_id fits a SQLite INTEGER and so can match a row."""
    return filter_id is not None and MIN_SQLITE_INTEGER <= filter_id <= MAX_SQLITE_INTEGER


class FilterRepository(Repository):
    """
    Repository for the filters table.

    Every call runs one statement in its own transaction. Storage errors
    propagate as StorageConstraintError or StorageUnavailableError; a
    missing row is reported as None or ignored, never raised.
    """

    def __init__(self, database: FilterDatabase):
        """Initialize repository with a database connection factory."""
        self.database = database

    def insert(self, filter: Filter) -> int:
        """
        Insert a new filter.

        A filter without an id gets one assigned by the database; a filter
        carrying an id is stored under that id.

        Args:
            filter: The filter to store. It is not modified.

        Returns:
            The id of the new row

        Raises:
            StorageConstraintError: If the row is rejected, e.g. a duplicate id
            OverflowError: If filter.id or a display attribute does not fit a
                64-bit integer
        """
        with self.database.get_connection(INSERT.name) as conn:
            cursor = conn.execute(INSERT.sql, filter.to_params())
            filter_id = cursor.lastrowid

        logger.info(f"Inserted filter {filter_id}")
        return filter_id

    def update(self, filter: Filter) -> None:
        """Overwrite the row matching filter.id; does nothing when no row matches."""
        if not _storable_id(filter.id):
            logger.debug(f"Update skipped, id {filter.id} cannot match a filter")
            return

        with self.database.get_connection(UPDATE.name) as conn:
            cursor = conn.execute(UPDATE.sql, filter.to_params())

        if cursor.rowcount:
            logger.info(f"Updated filter {filter.id}")
        else:
            logger.debug(f"Update skipped, no filter with id {filter.id}")

    def delete(self, filter_id: int) -> None:
        """Delete the filter with the given id; does nothing when absent."""
        if not _storable_id(filter_id):
            logger.debug(f"Delete skipped, id {filter_id} cannot match a filter")
            return

        with self.database.get_connection(DELETE.name) as conn:
            cursor = conn.execute(DELETE.sql, {'id': filter_id})

        if cursor.rowcount:
            logger.info(f"Deleted filter {filter_id}")
        else:
            logger.debug(f"Delete skipped, no filter with id {filter_id}")

    def get_by_id(self, filter_id: int) -> Optional[Filter]:
        """Find a filter by id."""
        if not _storable_id(filter_id):
            return None

        with self.database.get_connection(GET_BY_ID.name) as conn:
            row = conn.execute(GET_BY_ID.sql, {'id': filter_id}).fetchone()

        return Filter.from_row(row) if row else None

    def get_by_name(self, title: str) -> Optional[Filter]:
        """
        Find a filter by title, ignoring case.

        Titles are not unique. When several filters share a title the
        first one in storage order is returned.
        """
        with self.database.get_connection(GET_BY_NAME.name) as conn:
            row = conn.execute(GET_BY_NAME.sql, {'title': title}).fetchone()

        logger.debug(f"Lookup of filter '{title}': {'found' if row else 'not found'}")
        return Filter.from_row(row) if row else None

    def get_all(self) -> List[Filter]:
        """Get all filters in storage order."""
        with self.database.get_connection(GET_ALL.name) as conn:
            rows = conn.execute(GET_ALL.sql).fetchall()

        return [Filter.from_row(row) for row in rows]

    def get_filters(self) -> List[Filter]:
        """Alias of get_all kept for existing callers."""
        return self.get_all()

    def exists(self, filter_id: int) -> bool:
        """Check if a filter exists."""
        if not _storable_id(filter_id):
            return False

        with self.database.get_connection(EXISTS.name) as conn:
            return conn.execute(EXISTS.sql, {'id': filter_id}).fetchone() is not None

    def count(self) -> int:
        """Number of stored filters."""
        with self.database.get_connection(COUNT.name) as conn:
            return conn.execute(COUNT.sql).fetchone()[0]

    def get_all_frame(self) -> pd.DataFrame:
        """Get all filters as a DataFrame with one column per Filter attribute."""
        with self.database.get_connection(GET_ALL.name) as conn:
            frame = pd.read_sql_query(GET_ALL.sql, conn)

        return frame.rename(columns=COLUMN_NAMES)


# Name used by callers that treat the repository as the filter store
FilterStore = FilterRepository
