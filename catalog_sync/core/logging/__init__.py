"""
Logging module for the catalog sync library
"""

from .logger import get_logger, setup_logging, set_log_level, StructuredLogger
from .formatters import (
    JSONFormatter,
    ConsoleFormatter,
    SimpleFormatter,
)
from .handlers import FileHandler, ConsoleHandler
from .config import LoggingConfig

__all__ = [
    "get_logger",
    "setup_logging",
    "set_log_level",
    "StructuredLogger",
    "JSONFormatter",
    "ConsoleFormatter",
    "SimpleFormatter",
    "FileHandler",
    "ConsoleHandler",
    "LoggingConfig",
]
