"""Repository pattern implementations for data access."""

from .base import Repository
from .filter_repository import FilterRepository, FilterStore
from .statements import FILTER_STATEMENTS, Statement

__all__ = [
    'Repository',
    'FilterRepository',
    'FilterStore',
    'FILTER_STATEMENTS',
    'Statement'
]
