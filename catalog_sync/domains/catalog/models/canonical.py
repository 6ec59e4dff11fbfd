from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from catalog_sync.core.exceptions import ValidationError
from catalog_sync.shared.constants import ERROR_INVALID_STRUCTURE, ERROR_TRANSFORMATION


class NameValue(BaseModel):
    """Name/value pair used for variant attributes and product features"""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    value: Any = None


class ImageUrl(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    small: Optional[str] = None
    medium: Optional[str] = None


class CanonicalVariant(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    sku: str = ""
    url: Optional[str] = None
    attributes: List[NameValue] = Field(default_factory=list)


class CanonicalProduct(BaseModel):
    """Canonical product document - the shape sent to the search index.

    Locale-suffixed copies (``name_lt-LT``, ``variants_lt-LT``...) are kept as
    extra fields; Magento pass-through keys travel the same way. Numeric
    scalars in text fields are coerced to strings.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    sku: str
    name: Optional[str] = None
    brand: Optional[str] = None
    description: Optional[str] = None
    descriptionShort: Optional[str] = None
    categoryDefault: Optional[str] = None
    categories: Optional[List[str]] = None
    productUrl: Optional[str] = None
    imageUrl: Optional[ImageUrl] = None
    price: Optional[str] = None
    basePrice: Optional[str] = None
    priceTaxExcluded: Optional[str] = None
    basePriceTaxExcluded: Optional[str] = None
    formattedPrice: Optional[str] = None
    inStock: Optional[bool] = None
    variants: Optional[List[CanonicalVariant]] = None
    features: Optional[List[NameValue]] = None

    @classmethod
    def build(cls, fields: Mapping[str, Any]) -> "CanonicalProduct":
        """Validate adapter output, surfacing shape problems as ValidationError"""
        try:
            return cls(**fields)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ()))
            raise ValidationError(
                f"Invalid canonical product field '{field}': {first.get('msg')}",
                field=field,
                value=first.get("input"),
                error_code="INVALID_CANONICAL_PRODUCT",
                cause=e,
            ) from e

    def to_document(self) -> Dict[str, Any]:
        """Dump to a plain mapping, omitting unset optional fields"""
        return self.model_dump(exclude_none=True)


class ItemErrorType(str, Enum):
    TRANSFORMATION_ERROR = ERROR_TRANSFORMATION
    INVALID_STRUCTURE = ERROR_INVALID_STRUCTURE


class ItemError(BaseModel):
    """A single item that could not be transformed"""

    type: ItemErrorType
    product_index: int
    product_id: Optional[str] = None
    message: str
    exception_kind: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class TransformResult(BaseModel):
    """Canonical documents plus the per-item errors of one batch"""

    products: List[Dict[str, Any]] = Field(default_factory=list)
    errors: List[ItemError] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "products": self.products,
            "errors": [error.to_dict() for error in self.errors],
        }
