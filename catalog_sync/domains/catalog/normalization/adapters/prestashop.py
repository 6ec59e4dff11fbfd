from __future__ import annotations

from typing import Any, Dict, List, Mapping

from catalog_sync.core.exceptions import (
    PayloadStructureError,
    RequiredFieldError,
    ValidationError,
)
from catalog_sync.domains.catalog.models import CanonicalProduct
from catalog_sync.shared.constants import (
    DEFAULT_LOCALE,
    IMAGE_SIZE_KEYS,
    PLATFORM_PRESTASHOP,
)
from catalog_sync.shared.helpers import get_nested_value, strip_html, to_string
from ..base_adapter import BaseAdapter
from ..categories import from_leveled_buckets
from ..locale import (
    expand_localized,
    iter_localized,
    localized_field_name,
    value_for_locale,
)

PLATFORM_LABEL = "PrestaShop"

_PRICE_FIELDS = (
    "price",
    "basePrice",
    "priceTaxExcluded",
    "basePriceTaxExcluded",
    "formattedPrice",
)


def _required(product: Mapping[str, Any], field: str) -> str:
    if product.get(field) is None:
        raise RequiredFieldError(field, PLATFORM_LABEL)
    return to_string(product[field])


def _localized_text(container: Any) -> Any:
    """``{"localizedValues": {...}}`` (or ``localizedNames``) of a text field"""
    if not isinstance(container, Mapping):
        return None
    values = container.get("localizedValues")
    if values is None:
        values = container.get("localizedNames")
    return values


def _as_text(value: Any) -> Any:
    """Numeric scalars of text fields become strings; other values are kept"""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return to_string(value)
    return value


def _text_values(values: Any) -> Dict[str, Any]:
    return {locale: _as_text(value) for locale, value in iter_localized(values)}


class PrestaShopAdapter(BaseAdapter):
    """PrestaShop module export -> canonical documents.

    ``transform`` is strict and raises on the first product missing
    ``remoteId`` or ``sku``; ``transform_batch`` collects per-item errors
    like the other adapters.
    """

    platform = PLATFORM_PRESTASHOP

    def extract_items(self, payload: Dict[str, Any]) -> List[Any]:
        products = payload.get("products") if isinstance(payload, Mapping) else None
        if not isinstance(products, list):
            raise PayloadStructureError(
                "Invalid PrestaShop data: missing products array",
                platform=self.platform,
            )
        return products

    def item_id(self, product: Mapping[str, Any]) -> str:
        return to_string(product.get("remoteId"))

    def transform(self, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        products = []
        for index, item in enumerate(self.extract_items(payload)):
            if not isinstance(item, Mapping):
                raise ValidationError(
                    f"Invalid PrestaShop data: product at index {index} is not an object",
                    error_code="INVALID_STRUCTURE",
                )
            products.append(self.transform_product(item))
        self.logger.info(
            "Catalog products transformed", platform=self.platform, products=len(products)
        )
        return products

    def transform_product(self, product: Mapping[str, Any]) -> Dict[str, Any]:
        fields: Dict[str, Any] = {
            "id": _required(product, "remoteId"),
            "sku": _required(product, "sku"),
        }

        for price_field in _PRICE_FIELDS:
            if product.get(price_field) is not None:
                fields[price_field] = to_string(product[price_field])

        if product.get("inStock") is not None:
            fields["inStock"] = bool(product["inStock"])

        fields.update(expand_localized("name", _text_values(product.get("localizedNames"))))
        fields.update(
            expand_localized(
                "brand",
                _text_values(get_nested_value(product, ["brand", "localizedNames"])),
            )
        )

        for text_field in ("description", "descriptionShort"):
            stripped = {
                locale: strip_html(_as_text(value))
                for locale, value in iter_localized(_localized_text(product.get(text_field)))
            }
            fields.update(expand_localized(text_field, stripped))

        fields.update(
            expand_localized(
                "productUrl",
                _text_values(get_nested_value(product, ["productUrl", "localizedValues"])),
            )
        )

        fields.update(self._categories(product))

        image_url = self._image_url(product.get("imageUrl"))
        if image_url:
            fields["imageUrl"] = image_url

        fields.update(self._variants(product.get("variants")))
        fields.update(self._features(product.get("features")))

        return CanonicalProduct.build(fields).to_document()

    def _categories(self, product: Mapping[str, Any]) -> Dict[str, Any]:
        hierarchies = from_leveled_buckets(
            product.get("categories"),
            get_nested_value(product, ["categoryDefault", "localizedValues"]),
        )

        fields: Dict[str, Any] = {"categories": [], "categoryDefault": ""}
        for locale, hierarchy in hierarchies.items():
            if hierarchy.paths or locale == DEFAULT_LOCALE:
                fields[localized_field_name("categories", locale)] = hierarchy.paths
            if hierarchy.default or locale == DEFAULT_LOCALE:
                fields[localized_field_name("categoryDefault", locale)] = hierarchy.default
        return fields

    def _image_url(self, image_url: Any) -> Dict[str, str]:
        if not isinstance(image_url, Mapping):
            return {}
        return {
            size: image_url[size]
            for size in IMAGE_SIZE_KEYS
            if isinstance(image_url.get(size), str) and image_url[size]
        }

    def _variant_locales(self, variant: Mapping[str, Any]) -> List[str]:
        locales: List[str] = []
        sources = [get_nested_value(variant, ["productUrl", "localizedValues"])]
        attributes = variant.get("attributes")
        if isinstance(attributes, Mapping):
            sources.extend(
                attribute.get("localizedValues")
                for attribute in attributes.values()
                if isinstance(attribute, Mapping)
            )
        for source in sources:
            for locale, _ in iter_localized(source):
                if locale not in locales:
                    locales.append(locale)
        return locales

    def _variant_attributes(self, attributes: Any, locale: str) -> List[Dict[str, Any]]:
        if not isinstance(attributes, Mapping):
            return []
        result = []
        for name, attribute in attributes.items():
            if not isinstance(name, str) or not isinstance(attribute, Mapping):
                continue
            value = value_for_locale(attribute.get("localizedValues"), locale)
            if value is None:
                continue
            result.append({"name": name.lower(), "value": value})
        return result

    def _variants(self, variants: Any) -> Dict[str, List[Dict[str, Any]]]:
        by_field: Dict[str, List[Dict[str, Any]]] = {"variants": []}
        if not isinstance(variants, list):
            return by_field

        for variant in variants:
            if not isinstance(variant, Mapping) or variant.get("remoteId") is None:
                continue

            urls = get_nested_value(variant, ["productUrl", "localizedValues"])
            for locale in self._variant_locales(variant) or [DEFAULT_LOCALE]:
                entry = {
                    "id": to_string(variant["remoteId"]),
                    "sku": to_string(variant.get("sku")),
                    "attributes": self._variant_attributes(variant.get("attributes"), locale),
                }
                url = value_for_locale(urls, locale)
                if isinstance(url, str):
                    entry["url"] = url
                by_field.setdefault(localized_field_name("variants", locale), []).append(entry)

        return by_field

    def _features(self, features: Any) -> Dict[str, List[Dict[str, Any]]]:
        by_field: Dict[str, List[Dict[str, Any]]] = {}
        if not isinstance(features, list):
            return by_field

        for feature in features:
            if not isinstance(feature, Mapping):
                continue
            values = feature.get("localizedValues")
            for locale, name in iter_localized(feature.get("localizedNames")):
                value = value_for_locale(values, locale)
                if value is None:
                    continue
                by_field.setdefault(localized_field_name("features", locale), []).append(
                    {"name": _as_text(name), "value": value}
                )

        return by_field
