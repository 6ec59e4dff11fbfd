"""
Schema validation of canonical documents before they leave the process.

The field schema is a partial contract: only fields present in both the
schema and the document are checked, and every problem found is reported
(no short-circuit on the first error).
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from catalog_sync.core.exceptions import DataValidationError
from catalog_sync.core.logging import get_logger
from catalog_sync.domains.catalog.models import FieldConfig, FieldType
from catalog_sync.domains.catalog.models.field_types import NUMERIC_TYPES, STRING_TYPES
from catalog_sync.shared.constants import IMAGE_SIZE_KEYS
from catalog_sync.shared.helpers import (
    is_integer,
    is_number,
    is_valid_image_url,
    validate_url,
)

logger = get_logger(__name__)

_SIZE_KEYS_HINT = " or ".join(f"'{key}'" for key in IMAGE_SIZE_KEYS)


def _find_named_entry(entries: Any, name: str) -> Optional[Any]:
    """Entry of an attribute list/mapping matching ``name``"""
    if isinstance(entries, Mapping):
        return entries.get(name)
    if isinstance(entries, list):
        for entry in entries:
            if isinstance(entry, Mapping) and entry.get("name") == name:
                return entry
    return None


class DataValidator:
    def __init__(self, field_configuration: Mapping[str, FieldConfig]):
        self.field_configuration = dict(field_configuration)

    def collect_errors(self, product: Any) -> List[str]:
        """All schema violations of one document"""
        if not isinstance(product, Mapping):
            return ["Product must be an object"]

        errors: List[str] = []
        for field_name, field_config in self.field_configuration.items():
            if field_name not in product:
                continue
            errors.extend(
                self._validate_field(field_name, product[field_name], field_config)
            )
        return errors

    def validate_product(self, product: Any) -> None:
        errors = self.collect_errors(product)
        if errors:
            logger.warning("Product validation failed", errors=len(errors))
            raise DataValidationError("Product validation failed", errors)

    def collect_batch_errors(self, products: Sequence[Any]) -> List[str]:
        errors: List[str] = []
        for index, product in enumerate(products):
            errors.extend(
                f"Product {index}: {error}" for error in self.collect_errors(product)
            )
        return errors

    def validate_products(self, products: Sequence[Any]) -> None:
        """Validate every product, then raise once with all errors"""
        errors = self.collect_batch_errors(products)
        if errors:
            logger.warning(
                "Batch validation failed", products=len(products), errors=len(errors)
            )
            raise DataValidationError("Products validation failed", errors)

    def _validate_field(
        self, field_name: str, value: Any, field_config: FieldConfig
    ) -> List[str]:
        errors: List[str] = []
        field_type = field_config.type

        if field_type in STRING_TYPES:
            if not isinstance(value, str):
                errors.append(f"Field '{field_name}' must be a string")

        elif field_type == FieldType.URL:
            if not validate_url(value):
                errors.append(f"Field '{field_name}' must be a valid URL")

        elif field_type == FieldType.IMAGE_URL:
            errors.extend(self._validate_image_urls(field_name, value))

        elif field_type == FieldType.HIERARCHY:
            if not isinstance(value, list):
                errors.append(f"Field '{field_name}' must be a list for hierarchy type")
            elif any(not isinstance(item, str) for item in value):
                errors.append(f"Field '{field_name}' hierarchy items must be strings")

        elif field_type == FieldType.VARIANTS:
            errors.extend(self._validate_variants(field_name, value, field_config))

        elif field_type in NUMERIC_TYPES:
            if not is_number(value):
                errors.append(f"Field '{field_name}' must be a number")

        elif field_type == FieldType.INTEGER:
            if not is_integer(value):
                errors.append(f"Field '{field_name}' must be an integer")

        elif field_type == FieldType.NAME_VALUE_LIST:
            errors.extend(self._validate_name_value_list(field_name, value, field_config))

        if field_config.properties and isinstance(value, Mapping):
            for property_name, property_config in field_config.properties.items():
                if property_name in value:
                    errors.extend(
                        self._validate_field(
                            f"{field_name}.{property_name}",
                            value[property_name],
                            property_config,
                        )
                    )

        return errors

    def _validate_image_urls(self, field_name: str, image_urls: Any) -> List[str]:
        if not isinstance(image_urls, Mapping):
            return [f"Field '{field_name}' must be an object with image size keys"]

        if not image_urls:
            return [
                f"Field '{field_name}' cannot be empty; "
                f"expected standard size keys like {_SIZE_KEYS_HINT}"
            ]

        errors: List[str] = []
        for size, url in image_urls.items():
            if not isinstance(size, str) or not size.strip():
                errors.append(
                    f"Field '{field_name}' must have valid size keys (e.g., {_SIZE_KEYS_HINT})"
                )
                continue
            if not is_valid_image_url(url):
                errors.append(f"Field '{field_name}[{size}]' must be a valid image URL")

        if not any(size in image_urls for size in IMAGE_SIZE_KEYS):
            errors.append(
                f"Field '{field_name}' should include standard size keys like {_SIZE_KEYS_HINT}"
            )

        return errors

    def _validate_variants(
        self, field_name: str, variants: Any, field_config: FieldConfig
    ) -> List[str]:
        if not isinstance(variants, list):
            return [f"Field '{field_name}' must be a list for variants type"]

        errors: List[str] = []
        for index, variant in enumerate(variants):
            prefix = f"Field '{field_name}' variant at index {index}"
            if not isinstance(variant, Mapping):
                errors.append(f"{prefix} must be an object")
                continue

            for key in ("id", "sku"):
                if key in variant and not isinstance(variant[key], str):
                    errors.append(f"{prefix} '{key}' must be a string")

            url = variant.get("url")
            if url not in (None, "") and not validate_url(url):
                errors.append(f"{prefix} 'url' must be a valid URL")

            attributes = variant.get("attributes")
            if not isinstance(attributes, (list, Mapping)):
                errors.append(f"{prefix} must have an 'attributes' object")
                continue

            for attribute_name, attribute_config in (field_config.attributes or {}).items():
                entry = _find_named_entry(attributes, attribute_name)
                if entry is None:
                    continue
                if isinstance(entry, Mapping) and "name" in entry:
                    if "value" not in entry:
                        errors.append(
                            f"{prefix} attribute '{attribute_name}' must have 'name' and 'value' fields"
                        )
                        continue
                    if isinstance(attributes, Mapping) and entry["name"] != attribute_name:
                        errors.append(
                            f"{prefix} attribute '{attribute_name}' name field must match the attribute key"
                        )
                    entry = entry["value"]
                errors.extend(
                    self._validate_field(
                        f"{field_name}[{index}].attributes.{attribute_name}",
                        entry,
                        attribute_config,
                    )
                )

        return errors

    def _validate_name_value_list(
        self, field_name: str, entries: Any, field_config: FieldConfig
    ) -> List[str]:
        if not isinstance(entries, list):
            return [f"Field '{field_name}' must be a list of name/value objects"]

        errors: List[str] = []
        for index, entry in enumerate(entries):
            if (
                not isinstance(entry, Mapping)
                or not isinstance(entry.get("name"), str)
                or "value" not in entry
            ):
                errors.append(
                    f"Field '{field_name}' entry at index {index} must have 'name' and 'value' fields"
                )
                continue

            attribute_config = (field_config.attributes or {}).get(entry["name"])
            if attribute_config is not None:
                errors.extend(
                    self._validate_field(
                        f"{field_name}[{index}].{entry['name']}",
                        entry["value"],
                        attribute_config,
                    )
                )

        return errors


def validate_product(product: Any, field_configuration: Mapping[str, FieldConfig]) -> None:
    DataValidator(field_configuration).validate_product(product)


def validate_products(
    products: Sequence[Any], field_configuration: Mapping[str, FieldConfig]
) -> None:
    DataValidator(field_configuration).validate_products(products)


def collect_errors(
    product: Any, field_configuration: Mapping[str, FieldConfig]
) -> List[str]:
    return DataValidator(field_configuration).collect_errors(product)


