"""
Main logging module for the catalog sync library
"""

import logging
from typing import Dict, List, Optional

from .config import LoggingConfig
from .handlers import FileHandler, ConsoleHandler

# Global logger cache
_loggers: Dict[str, logging.Logger] = {}


class StructuredLogger:
    """Wrapper around standard Python logger that supports structured logging with keyword arguments"""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured data as key=value pairs"""
        if not kwargs:
            return message

        structured_parts = []
        for key, value in kwargs.items():
            if value is not None:
                if isinstance(value, (dict, list)):
                    structured_parts.append(f"{key}={str(value)}")
                elif isinstance(value, str) and " " in value:
                    # Quote strings with spaces
                    structured_parts.append(f'{key}="{value}"')
                else:
                    structured_parts.append(f"{key}={value}")

        if structured_parts:
            return f"{message} | {' | '.join(structured_parts)}"
        return message

    def _log(self, level: int, message: str, kwargs: dict) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra = {"extra_fields": {k: v for k, v in kwargs.items() if v is not None}}
        self._logger.log(level, self._format_message(message, **kwargs), extra=extra)

    def debug(self, message: str, **kwargs):
        """Log debug message with structured data"""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with structured data"""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with structured data"""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with structured data"""
        self._log(logging.ERROR, message, kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception message with structured data"""
        extra = {"extra_fields": {k: v for k, v in kwargs.items() if v is not None}}
        self._logger.exception(self._format_message(message, **kwargs), extra=extra)


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Install handlers on the root logger.

    Meant to be called once by the host application; importing the library
    never touches the root logger.
    """
    if config is None:
        config = LoggingConfig()

    level = getattr(logging, config.level.upper())
    handlers: List[logging.Handler] = []

    if config.file.enabled:
        file_kwargs = dict(
            log_dir=config.file.log_dir,
            max_bytes=config.file.max_file_size,
            backup_count=config.file.backup_count,
            formatter_type=config.format,
        )
        if config.file.app_log_enabled:
            handlers.append(FileHandler.create_app_handler(level=level, **file_kwargs))
        if config.file.error_log_enabled:
            handlers.append(FileHandler.create_error_handler(**file_kwargs))

    if config.console.enabled:
        handlers.append(
            ConsoleHandler.create_handler(
                level=getattr(logging, config.console.level.upper()),
                formatter_type=config.format,
            )
        )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    for handler in handlers:
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        "Logging configured", extra={"extra_fields": {"handlers": len(handlers)}}
    )


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance"""
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return StructuredLogger(_loggers[name])


def set_log_level(name: str, level: str) -> None:
    """Set log level for a specific logger"""
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    _loggers[name].setLevel(getattr(logging, level.upper()))
