"""
Logging configuration for the catalog sync library
"""

from dataclasses import dataclass
from typing import Any, Dict

from pydantic import BaseModel, Field

from catalog_sync.core.config.settings import LoggingSettings


@dataclass
class FileHandlerConfig:
    """File handler configuration"""

    enabled: bool = False
    log_dir: str = "logs"
    max_file_size: int = 10485760  # 10MB
    backup_count: int = 5
    app_log_enabled: bool = True
    error_log_enabled: bool = True


@dataclass
class ConsoleHandlerConfig:
    """Console handler configuration"""

    enabled: bool = True
    level: str = "INFO"


class LoggingConfig(BaseModel):
    """Complete logging configuration"""

    level: str = "INFO"
    format: str = "console"  # console, json, structured or simple

    file: FileHandlerConfig = Field(default_factory=FileHandlerConfig)
    console: ConsoleHandlerConfig = Field(default_factory=ConsoleHandlerConfig)

    @classmethod
    def from_settings(cls, settings: LoggingSettings) -> "LoggingConfig":
        """Build a logging config from environment-driven settings"""
        return cls(
            level=settings.LOG_LEVEL,
            format=settings.LOG_FORMAT,
            file=FileHandlerConfig(
                enabled=settings.LOG_FILE_ENABLED,
                log_dir=settings.LOG_DIR,
                max_file_size=settings.LOG_MAX_FILE_SIZE,
                backup_count=settings.LOG_BACKUP_COUNT,
            ),
            console=ConsoleHandlerConfig(
                enabled=settings.LOG_CONSOLE_ENABLED,
                level=settings.LOG_LEVEL,
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "level": self.level,
            "format": self.format,
            "file": {
                "enabled": self.file.enabled,
                "log_dir": self.file.log_dir,
                "max_file_size": self.file.max_file_size,
                "backup_count": self.file.backup_count,
                "app_log_enabled": self.file.app_log_enabled,
                "error_log_enabled": self.file.error_log_enabled,
            },
            "console": {
                "enabled": self.console.enabled,
                "level": self.console.level,
            },
        }
