"""Configuration management package."""

from .config_manager import ConfigManager, DatabaseConfig, LoggingConfig

__all__ = [
    'ConfigManager',
    'DatabaseConfig',
    'LoggingConfig'
]
