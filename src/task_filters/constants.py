"""Central constants for the filter store."""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"
CONFIGS_DIR = PROJECT_ROOT / "configs"

# Database
DB_PATH = DATA_DIR / "filters.db"
DEFAULT_DB_TIMEOUT = 30.0

# Table layout
FILTERS_TABLE = "filters"
ID_COLUMN = "_id"

# Range of a SQLite INTEGER
MIN_SQLITE_INTEGER = -2 ** 63
MAX_SQLITE_INTEGER = 2 ** 63 - 1

# Display defaults for a new filter
DEFAULT_COLOR = 0
DEFAULT_ICON = -1
DEFAULT_ORDER = -1

# Environment overrides
ENV_PREFIX = "TASK_FILTERS_"
ENV_DB_PATH = ENV_PREFIX + "DB_PATH"
ENV_DB_TIMEOUT = ENV_PREFIX + "DB_TIMEOUT"
ENV_LOG_LEVEL = ENV_PREFIX + "LOG_LEVEL"
ENV_LOG_FILE = ENV_PREFIX + "LOG_FILE"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
