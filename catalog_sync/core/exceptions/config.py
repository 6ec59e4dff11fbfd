"""
Configuration-related exceptions
"""

from .base import CatalogSyncException
from typing import Optional


class ConfigurationError(CatalogSyncException):
    """Raised when there's a configuration error"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[dict] = None,
        cause: Optional[Exception] = None,
        error_code: str = "CONFIG_ERROR",
    ):
        config_details = {"config_key": config_key}
        if details:
            config_details.update(details)
        super().__init__(
            message,
            error_code,
            config_details,
            cause,
        )


class InvalidFieldConfigError(ConfigurationError):
    """Raised when a field schema node is malformed"""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            config_key=field_name,
            cause=cause,
            error_code="INVALID_FIELD_CONFIG",
        )
