from .canonical import (
    CanonicalProduct,
    CanonicalVariant,
    ImageUrl,
    ItemError,
    ItemErrorType,
    NameValue,
    TransformResult,
)
from .field_config import FieldConfig, schema_from_dict, schema_to_dict
from .field_config_builder import FieldConfigBuilder
from .field_types import FieldType

__all__ = [
    "CanonicalProduct",
    "CanonicalVariant",
    "ImageUrl",
    "ItemError",
    "ItemErrorType",
    "NameValue",
    "TransformResult",
    "FieldConfig",
    "FieldConfigBuilder",
    "FieldType",
    "schema_from_dict",
    "schema_to_dict",
]
