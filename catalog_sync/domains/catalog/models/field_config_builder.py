"""
Shortcuts for building field schemas, including the stock e-commerce schema
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from catalog_sync.shared.constants import DEFAULT_LOCALE
from .field_config import FieldConfig
from .field_types import FieldType

# Locales whose fields are indexed without a suffix
UNSUFFIXED_LOCALES = (DEFAULT_LOCALE, "en")


class FieldConfigBuilder:
    """Static factory methods for FieldConfig nodes"""

    @staticmethod
    def text_keyword(
        subfields: Optional[Dict] = None, embeddable: Optional[bool] = None
    ) -> FieldConfig:
        return FieldConfig.create(
            FieldType.TEXT_KEYWORD, subfields=subfields, embeddable=embeddable
        )

    @staticmethod
    def text(
        subfields: Optional[Dict] = None, embeddable: Optional[bool] = None
    ) -> FieldConfig:
        return FieldConfig.create(
            FieldType.TEXT, subfields=subfields, embeddable=embeddable
        )

    @staticmethod
    def keyword(subfields: Optional[Dict] = None) -> FieldConfig:
        return FieldConfig.create(FieldType.KEYWORD, subfields=subfields)

    @staticmethod
    def hierarchy(embeddable: bool = False) -> FieldConfig:
        return FieldConfig.create(FieldType.HIERARCHY, embeddable=embeddable)

    @staticmethod
    def url() -> FieldConfig:
        return FieldConfig.create(FieldType.URL)

    @staticmethod
    def image_url() -> FieldConfig:
        return FieldConfig.create(FieldType.IMAGE_URL)

    @staticmethod
    def float() -> FieldConfig:
        return FieldConfig.create(FieldType.FLOAT)

    @staticmethod
    def integer() -> FieldConfig:
        return FieldConfig.create(FieldType.INTEGER)

    @staticmethod
    def double() -> FieldConfig:
        return FieldConfig.create(FieldType.DOUBLE)

    @staticmethod
    def variants(attributes: Optional[Dict[str, FieldConfig]] = None) -> FieldConfig:
        return FieldConfig.create(FieldType.VARIANTS, attributes=attributes)

    @staticmethod
    def features(attributes: Optional[Dict[str, FieldConfig]] = None) -> FieldConfig:
        """Name/value list such as product features"""
        return FieldConfig.create(FieldType.NAME_VALUE_LIST, attributes=attributes)

    @classmethod
    def ecommerce_fields(cls, locales: Iterable[str]) -> Dict[str, FieldConfig]:
        """
        Field schema for a typical product catalog.

        Every locale other than en-US/en gets its own suffixed copy of the
        localized fields (``name_lt-LT``, ``categories_lt-LT``, ...).
        """
        fields: Dict[str, FieldConfig] = {
            "id": cls.keyword(),
            "name": cls.text_keyword(embeddable=True),
            "brand": cls.text_keyword(embeddable=True),
            "price": cls.double(),
            "formattedPrice": cls.keyword(),
            "categoryDefault": cls.text_keyword(),
            "categories": cls.hierarchy(embeddable=True),
            "sku": cls.keyword(),
            "imageUrl": cls.image_url(),
            "productUrl": cls.url(),
            "descriptionShort": cls.text_keyword(),
            "description": cls.text_keyword(embeddable=True),
        }

        for locale in locales:
            suffix = "" if locale in UNSUFFIXED_LOCALES else f"_{locale}"
            fields[f"name{suffix}"] = cls.text_keyword(embeddable=True)
            fields[f"brand{suffix}"] = cls.text_keyword(embeddable=True)
            fields[f"categoryDefault{suffix}"] = cls.text_keyword()
            fields[f"categories{suffix}"] = cls.hierarchy(embeddable=True)
            fields[f"descriptionShort{suffix}"] = cls.text_keyword()
            fields[f"description{suffix}"] = cls.text_keyword(embeddable=True)
            fields[f"productUrl{suffix}"] = cls.url()

        return fields

    @classmethod
    def add_to_ecommerce_fields(
        cls,
        custom_fields: Optional[Mapping[str, FieldConfig]] = None,
        locales: Iterable[str] = (),
    ) -> Dict[str, FieldConfig]:
        """Stock e-commerce schema with custom fields added or overriding"""
        fields = cls.ecommerce_fields(locales)
        fields.update(custom_fields or {})
        return fields
