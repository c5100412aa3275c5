"""Custom exceptions for the filter store."""

from typing import Any, Optional


class FilterStoreException(Exception):
    """Base exception for all filter store errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        """Initialize exception with message and optional details."""
        super().__init__(message)
        self.message = message
        self.details = details or {}


class StorageException(FilterStoreException):
    """Base exception for storage engine errors."""
    pass


class ConfigurationException(FilterStoreException):
    """Base exception for configuration errors."""
    pass


# Storage Exceptions
class StorageConstraintError(StorageException):
    """Raised when the storage engine rejects a row."""

    def __init__(self, operation: str, original_error: Exception):
        """Initialize with the failed operation and original error."""
        message = f"Constraint violated during {operation}: {str(original_error)}"
        super().__init__(message, {
            'operation': operation,
            'original_error': str(original_error)
        })


class StorageUnavailableError(StorageException):
    """Raised when the database cannot be reached or queried."""

    def __init__(self, db_path: str, original_error: Exception):
        """Initialize with database path and original error."""
        message = f"Storage unavailable at {db_path}: {str(original_error)}"
        super().__init__(message, {
            'db_path': db_path,
            'original_error': str(original_error)
        })


# Configuration Exceptions
class ConfigurationNotFoundError(ConfigurationException):
    """Raised when configuration file is not found."""

    def __init__(self, config_path: str):
        """Initialize with configuration path."""
        message = f"Configuration file not found: {config_path}"
        super().__init__(message, {'config_path': config_path})


class InvalidConfigurationError(ConfigurationException):
    """Raised when configuration contains invalid values."""

    def __init__(self, key: str, value: Any, reason: str):
        """Initialize with invalid configuration details."""
        message = f"Invalid configuration for {key}: {reason}"
        super().__init__(message, {
            'key': key,
            'value': value,
            'reason': reason
        })


def handle_exception(exception: Exception, logger=None, reraise: bool = True):
    """
    Centralized exception handler.

    Args:
        exception: The exception to handle
        logger: Optional logger instance
        reraise: Whether to re-raise the exception
    """
    if logger:
        if isinstance(exception, FilterStoreException):
            logger.error(f"{exception.message} - Details: {exception.details}")
        else:
            logger.error(f"Unexpected error: {str(exception)}", exc_info=True)

    if reraise:
        raise exception
