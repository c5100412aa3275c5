"""Domain model for saved filters (smart lists)."""

import sqlite3
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional

from ...constants import DEFAULT_COLOR, DEFAULT_ICON, DEFAULT_ORDER, ID_COLUMN


@dataclass
class Filter:
    """A saved search shown as a list in the task application."""
    id: Optional[int] = None  # Assigned by the database on insert
    title: Optional[str] = None
    sql: Optional[str] = None  # WHERE clause of the saved search
    values: Optional[str] = None  # Serialized defaults for new tasks
    criterion: Optional[str] = None  # Serialized custom filter criteria
    color: int = DEFAULT_COLOR
    icon: int = DEFAULT_ICON
    order: int = DEFAULT_ORDER

    def with_id(self, filter_id: int) -> 'Filter':
        """Return a copy carrying the given id."""
        return replace(self, id=filter_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def to_params(self) -> Dict[str, Any]:
        """Named statement parameters for this filter."""
        return {
            'id': self.id,
            'title': self.title,
            'sql': self.sql,
            'values': self.values,
            'criterion': self.criterion,
            'color': self.color,
            'icon': self.icon,
            'order': self.order
        }

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> 'Filter':
        """Create a Filter from a row of the filters table."""
        return cls(
            id=row[ID_COLUMN],
            title=row['title'],
            sql=row['sql'],
            values=row['values'],
            criterion=row['criterion'],
            color=row['f_color'],
            icon=row['f_icon'],
            order=row['f_order']
        )
