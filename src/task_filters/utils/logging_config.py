# src/task_filters/utils/logging_config.py
import copy
import logging
import logging.config
from pathlib import Path
from typing import Optional

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
    },
    "handlers": {
        "default": {
            "level": "DEBUG",
            "formatter": "standard",
            "class": "logging.StreamHandler",
        },
    },
    "loggers": {
        "": {"handlers": ["default"], "level": "INFO", "propagate": False}
    },
}


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> dict:
    """Apply LOGGING_CONFIG at the given level, adding a file handler when log_file is set."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["loggers"][""]["level"] = level.upper()

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        config["handlers"]["file"] = {
            "level": "DEBUG",
            "formatter": "standard",
            "class": "logging.FileHandler",
            "filename": str(log_file),
            "mode": "a",
        }
        config["loggers"][""]["handlers"].append("file")

    logging.config.dictConfig(config)
    return config
