from .data_validator import (
    DataValidator,
    collect_errors,
    validate_product,
    validate_products,
)

__all__ = ["DataValidator", "collect_errors", "validate_product", "validate_products"]
