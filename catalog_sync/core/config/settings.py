"""
Application settings and configuration management
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog_sync.shared.constants.app import (
    PROJECT_NAME,
    VERSION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_DIR,
    DEFAULT_LOG_MAX_FILE_SIZE,
    DEFAULT_LOG_BACKUP_COUNT,
)
from catalog_sync.core.exceptions import ConfigurationError

LOG_FORMATS = ("console", "json", "structured", "simple")


class LoggingSettings(BaseSettings):
    """Logging configuration settings"""

    model_config = SettingsConfigDict(
        env_file=[".env.local", ".env"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(default=DEFAULT_LOG_LEVEL)
    LOG_FORMAT: str = Field(default=DEFAULT_LOG_FORMAT)

    # File logging is opt-in; the library is usually embedded in a host process
    LOG_FILE_ENABLED: bool = Field(default=False)
    LOG_DIR: str = Field(default=DEFAULT_LOG_DIR)
    LOG_MAX_FILE_SIZE: int = Field(default=DEFAULT_LOG_MAX_FILE_SIZE)
    LOG_BACKUP_COUNT: int = Field(default=DEFAULT_LOG_BACKUP_COUNT)

    LOG_CONSOLE_ENABLED: bool = Field(default=True)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        if not v:
            return DEFAULT_LOG_LEVEL
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if not v:
            return DEFAULT_LOG_FORMAT
        v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}")
        return v


class Settings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=[".env.local", ".env"],  # Try .env.local first, then .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    PROJECT_NAME: str = PROJECT_NAME
    VERSION: str = VERSION

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def validate_configuration(self) -> None:
        """Validate the complete configuration"""
        if self.logging.LOG_MAX_FILE_SIZE <= 0:
            raise ConfigurationError(
                "LOG_MAX_FILE_SIZE must be greater than 0",
                config_key="LOG_MAX_FILE_SIZE",
            )
        if self.logging.LOG_BACKUP_COUNT < 0:
            raise ConfigurationError(
                "LOG_BACKUP_COUNT cannot be negative",
                config_key="LOG_BACKUP_COUNT",
            )


def get_settings() -> Settings:
    """Build and validate settings from the environment"""
    settings = Settings()
    settings.validate_configuration()
    return settings
