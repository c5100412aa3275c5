"""Dependency injection container for the filter store."""

import logging
from typing import Any, Dict, Optional

from .config.config_manager import ConfigManager
from .database import FilterDatabase
from .repositories.filter_repository import FilterRepository

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Dependency injection container for managing service instances.

    Builds the configuration first and creates the database and the
    filter repository on first access.
    """

    def __init__(self, config_path: Optional[str] = None, db_path: Optional[str] = None):
        """
        Initialize the service container.

        Args:
            config_path: Optional path to configuration file
            db_path: Optional database path taking precedence over configuration
        """
        self._instances: Dict[str, Any] = {}
        self._db_path = db_path

        self._config = ConfigManager(config_file=config_path)
        self._config.validate()

        logger.debug("Service container initialized")

    @property
    def config(self) -> ConfigManager:
        """Get configuration manager."""
        return self._config

    @property
    def database(self) -> FilterDatabase:
        """Get filter database (singleton)."""
        if 'database' not in self._instances:
            db_config = self._config.database
            self._instances['database'] = FilterDatabase(
                self._db_path or db_config.path,
                timeout=db_config.timeout,
                foreign_keys=db_config.foreign_keys
            )
            logger.debug("FilterDatabase initialized")
        return self._instances['database']

    @property
    def filter_repository(self) -> FilterRepository:
        """Get filter repository (singleton)."""
        if 'filter_repository' not in self._instances:
            self._instances['filter_repository'] = FilterRepository(self.database)
            logger.debug("FilterRepository initialized")
        return self._instances['filter_repository']

    def reset(self) -> None:
        """Reset all service instances."""
        self._instances.clear()
        logger.debug("Service container reset - all instances cleared")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.reset()


# Global container instance (can be overridden for testing)
_global_container: Optional[ServiceContainer] = None


def get_container(config_path: Optional[str] = None,
                  db_path: Optional[str] = None,
                  reset: bool = False) -> ServiceContainer:
    """
    Get the global service container.

    Args:
        config_path: Optional configuration file path
        db_path: Optional database path override
        reset: Whether to reset existing container

    Returns:
        ServiceContainer instance
    """
    global _global_container

    if reset or _global_container is None:
        _global_container = ServiceContainer(config_path=config_path, db_path=db_path)

    return _global_container


def reset_container():
    """Reset the global container."""
    global _global_container
    if _global_container:
        _global_container.reset()
    _global_container = None
