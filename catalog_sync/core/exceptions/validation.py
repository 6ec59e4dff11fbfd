"""
Validation-related exceptions
"""

from typing import Any, Dict, List, Optional
from .base import CatalogSyncException


class ValidationError(CatalogSyncException):
    """Base exception for validation errors"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        error_code: str = "VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        validation_details = {"field": field, "value": value}
        if details:
            validation_details.update(details)
        super().__init__(
            message=message,
            error_code=error_code,
            details=validation_details,
            cause=cause,
        )
        self.field = field


class PayloadStructureError(ValidationError):
    """Raised when a source payload lacks its top-level container.

    This aborts the whole transform call: the caller passed the wrong kind of
    payload, it is not a data-quality problem of a single item.
    """

    def __init__(self, message: str, platform: str, **kwargs):
        super().__init__(
            message=message,
            error_code="PAYLOAD_STRUCTURE_ERROR",
            details={"platform": platform},
            **kwargs,
        )
        self.platform = platform


class RequiredFieldError(ValidationError):
    """Raised when a source item is missing a required field"""

    def __init__(self, field: str, platform: str, message: Optional[str] = None):
        super().__init__(
            message=message
            or f"Required field '{field}' is missing from {platform} data",
            field=field,
            error_code="REQUIRED_FIELD_ERROR",
            details={"platform": platform},
        )
        self.platform = platform


class DataValidationError(ValidationError):
    """Raised when a canonical document does not satisfy the field schema"""

    def __init__(
        self,
        message: str,
        validation_errors: List[str],
        **kwargs,
    ):
        super().__init__(
            message=message,
            error_code="DATA_VALIDATION_ERROR",
            details={"validation_errors": validation_errors},
            **kwargs,
        )
        self.errors = list(validation_errors)
