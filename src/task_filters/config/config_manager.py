"""Configuration management for the filter store."""

import os
import copy
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass
import logging

from dotenv import find_dotenv, load_dotenv

from ..constants import (
    CONFIGS_DIR, DB_PATH, DEFAULT_DB_TIMEOUT, LOG_LEVELS,
    ENV_DB_PATH, ENV_DB_TIMEOUT, ENV_LOG_LEVEL, ENV_LOG_FILE
)
from ..exceptions import ConfigurationNotFoundError, InvalidConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class DatabaseConfig:
    """Database configuration."""
    path: str
    timeout: float = DEFAULT_DB_TIMEOUT
    foreign_keys: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None


class ConfigManager:
    """Manages application configuration."""

    def __init__(self, config_file: Optional[str] = None, load_env_file: bool = True):
        """
        Initialize configuration manager.

        Args:
            config_file: YAML file merged over the defaults. The default
                location is optional; an explicitly passed file must exist.
            load_env_file: Whether to read a .env file, searched from the
                working directory upwards, before applying environment
                overrides
        """
        if config_file is not None and not Path(config_file).exists():
            raise ConfigurationNotFoundError(str(config_file))

        self.config_file = Path(config_file) if config_file else CONFIGS_DIR / "main_config.yaml"
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))
        self._config = self._load_config()
        self._override_from_env()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file."""
        config = self._get_default_config()

        if not self.config_file.exists():
            logger.debug(f"Config file not found, using defaults: {self.config_file}")
            return config

        with open(self.config_file, 'r') as f:
            loaded = yaml.safe_load(f) or {}
        logger.info(f"Loaded configuration from {self.config_file}")

        self._merge_configs(config, loaded)
        return config

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            'database': {
                'path': str(DB_PATH),
                'timeout': DEFAULT_DB_TIMEOUT,
                'foreign_keys': True
            },
            'logging': {
                'level': 'INFO',
                'file': None
            }
        }

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]):
        """Recursively merge override into base."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge_configs(base[key], value)
            else:
                base[key] = value

    def _override_from_env(self):
        """Override configuration from environment variables."""
        if db_path := os.getenv(ENV_DB_PATH):
            self._config['database']['path'] = db_path

        if timeout := os.getenv(ENV_DB_TIMEOUT):
            try:
                self._config['database']['timeout'] = float(timeout)
            except ValueError:
                raise InvalidConfigurationError('database.timeout', timeout, "not a number")

        if log_level := os.getenv(ENV_LOG_LEVEL):
            self._config['logging']['level'] = log_level.upper()

        if log_file := os.getenv(ENV_LOG_FILE):
            self._config['logging']['file'] = log_file

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration."""
        return DatabaseConfig(**self._config.get('database', {}))

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return LoggingConfig(**self._config.get('logging', {}))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key."""
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def to_dict(self) -> Dict[str, Any]:
        """Get configuration as dictionary."""
        return copy.deepcopy(self._config)

    def validate(self) -> bool:
        """
        Validate configuration.

        Raises:
            InvalidConfigurationError: For the first invalid value found
        """
        timeout = self.database.timeout
        if not isinstance(timeout, (int, float)) or timeout <= 0:
            raise InvalidConfigurationError('database.timeout', timeout, "must be a positive number")

        level = self.logging.level
        if str(level).upper() not in LOG_LEVELS:
            raise InvalidConfigurationError('logging.level', level, f"must be one of {LOG_LEVELS}")

        logger.debug("Configuration validation passed")
        return True
