"""
Handler factories used by ``setup_logging``
"""

import logging
import logging.handlers
import os

from catalog_sync.shared.constants.app import (
    APP_LOG_FILE,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_DIR,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_MAX_FILE_SIZE,
    ERROR_LOG_FILE,
)
from .formatters import build_formatter


class FileHandler:
    """Rotating file handler factory"""

    @staticmethod
    def create(
        filename: str,
        log_dir: str = DEFAULT_LOG_DIR,
        max_bytes: int = DEFAULT_LOG_MAX_FILE_SIZE,
        backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
        level: int = logging.INFO,
        formatter_type: str = DEFAULT_LOG_FORMAT,
    ) -> logging.handlers.RotatingFileHandler:
        os.makedirs(log_dir, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, filename),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(build_formatter(formatter_type))
        return handler

    @classmethod
    def create_app_handler(cls, level: int = logging.INFO, **kwargs):
        """All records at ``level`` and above"""
        return cls.create(APP_LOG_FILE, level=level, **kwargs)

    @classmethod
    def create_error_handler(cls, **kwargs):
        """Warnings and errors only, e.g. skipped catalog items"""
        return cls.create(ERROR_LOG_FILE, level=logging.WARNING, **kwargs)


class ConsoleHandler:
    """Console (stderr) handler factory"""

    @staticmethod
    def create_handler(
        level: int = logging.INFO, formatter_type: str = DEFAULT_LOG_FORMAT
    ) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(build_formatter(formatter_type))
        return handler
