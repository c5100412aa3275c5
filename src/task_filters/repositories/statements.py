"""Parameterized statements used by the filter repository."""

import re
from typing import Dict, NamedTuple, Tuple

from ..constants import FILTERS_TABLE, ID_COLUMN


class Statement(NamedTuple):
    """A named SQL statement with named parameters."""
    name: str
    sql: str

    @property
    def parameters(self) -> Tuple[str, ...]:
        """Names of the :placeholders used by the statement, in order."""
        # Quoted literals and identifiers can contain colons
        unquoted = re.sub(r"'[^']*'|\"[^\"]*\"", ' ', self.sql)
        return tuple(dict.fromkeys(re.findall(r':(\w+)', unquoted)))


INSERT = Statement(
    'insert',
    f'INSERT INTO {FILTERS_TABLE} '
    f'({ID_COLUMN}, title, sql, "values", criterion, f_color, f_icon, f_order) '
    f'VALUES (:id, :title, :sql, :values, :criterion, :color, :icon, :order)'
)

UPDATE = Statement(
    'update',
    f'UPDATE {FILTERS_TABLE} SET title = :title, sql = :sql, "values" = :values, '
    f'criterion = :criterion, f_color = :color, f_icon = :icon, f_order = :order '
    f'WHERE {ID_COLUMN} = :id'
)

DELETE = Statement(
    'delete',
    f'DELETE FROM {FILTERS_TABLE} WHERE {ID_COLUMN} = :id'
)

GET_BY_ID = Statement(
    'get_by_id',
    f'SELECT * FROM {FILTERS_TABLE} WHERE {ID_COLUMN} = :id LIMIT 1'
)

# Duplicate titles resolve to the first row in storage order
GET_BY_NAME = Statement(
    'get_by_name',
    f'SELECT * FROM {FILTERS_TABLE} WHERE title = :title COLLATE NOCASE LIMIT 1'
)

GET_ALL = Statement(
    'get_all',
    f'SELECT * FROM {FILTERS_TABLE}'
)

EXISTS = Statement(
    'exists',
    f'SELECT 1 FROM {FILTERS_TABLE} WHERE {ID_COLUMN} = :id LIMIT 1'
)

COUNT = Statement(
    'count',
    f'SELECT COUNT(*) FROM {FILTERS_TABLE}'
)

FILTER_STATEMENTS: Dict[str, Statement] = {
    statement.name: statement
    for statement in (INSERT, UPDATE, DELETE, GET_BY_ID, GET_BY_NAME, GET_ALL, EXISTS, COUNT)
}
