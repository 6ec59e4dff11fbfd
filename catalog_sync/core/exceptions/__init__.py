"""
Custom exceptions for the catalog sync library
"""

from .base import CatalogSyncException
from .config import ConfigurationError, InvalidFieldConfigError
from .validation import (
    ValidationError,
    PayloadStructureError,
    RequiredFieldError,
    DataValidationError,
)

__all__ = [
    "CatalogSyncException",
    "ConfigurationError",
    "InvalidFieldConfigError",
    "ValidationError",
    "PayloadStructureError",
    "RequiredFieldError",
    "DataValidationError",
]
