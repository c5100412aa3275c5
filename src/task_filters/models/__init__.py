"""Data models."""

from .domain import Filter

__all__ = ['Filter']
