"""Domain models for the filter store."""

from .filter import Filter

__all__ = [
    'Filter'
]
