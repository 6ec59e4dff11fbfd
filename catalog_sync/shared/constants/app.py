"""
Application constants
"""

PROJECT_NAME = "catalog-sync"
VERSION = "0.1.0"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_MAX_FILE_SIZE = 10485760  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5

APP_LOG_FILE = "catalog_sync.log"
ERROR_LOG_FILE = "catalog_sync_errors.log"

__all__ = [
    "PROJECT_NAME",
    "VERSION",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_FORMAT",
    "DEFAULT_LOG_DIR",
    "DEFAULT_LOG_MAX_FILE_SIZE",
    "DEFAULT_LOG_BACKUP_COUNT",
    "APP_LOG_FILE",
    "ERROR_LOG_FILE",
]
