"""
Data access for saved task filters (smart lists).

Usage:
    from task_filters import FilterDatabase, FilterRepository, Filter

    repo = FilterRepository(FilterDatabase("data/filters.db"))
    filter_id = repo.insert(Filter(title="Work"))
    repo.get_by_name("work")
"""

from .database import FilterDatabase
from .exceptions import (
    FilterStoreException, StorageException, StorageConstraintError,
    StorageUnavailableError, ConfigurationException
)
from .models.domain import Filter
from .repositories import FilterRepository, FilterStore

__version__ = "1.0.0"
__all__ = [
    'ConfigurationException',
    'Filter',
    'FilterDatabase',
    'FilterRepository',
    'FilterStore',
    'FilterStoreException',
    'StorageConstraintError',
    'StorageException',
    'StorageUnavailableError'
]
