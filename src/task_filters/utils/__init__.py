"""Utility helpers."""

from .logging_config import LOGGING_CONFIG, setup_logging

__all__ = ['LOGGING_CONFIG', 'setup_logging']
