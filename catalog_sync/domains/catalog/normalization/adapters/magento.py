from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from catalog_sync.core.exceptions import PayloadStructureError, RequiredFieldError
from catalog_sync.domains.catalog.models import CanonicalProduct
from catalog_sync.shared.constants import DEFAULT_PRICE, PLATFORM_MAGENTO
from catalog_sync.shared.helpers import get_nested_value, strip_html, to_string
from ..base_adapter import BaseAdapter
from ..categories import from_parent_paths

_REQUIRED_FIELDS = ("id", "sku", "name")

_PAGE_INFO_FIELDS = ("current_page", "page_size", "total_pages")


def _as_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return None


def _price(product: Mapping[str, Any], key: str) -> Optional[str]:
    value = get_nested_value(product, ["price_range", "minimum_price", key, "value"])
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return to_string(value)
    return None


def _html_text(product: Mapping[str, Any], field: str) -> Optional[str]:
    html = get_nested_value(product, [field, "html"])
    if isinstance(html, str) and html:
        return strip_html(html)
    return None


class MagentoAdapter(BaseAdapter):
    """Magento GraphQL ``products`` query -> canonical documents.

    Pass-through first: every source field survives, the unified
    canonical fields are laid on top of it.
    """

    platform = PLATFORM_MAGENTO

    def extract_items(self, payload: Dict[str, Any]) -> List[Any]:
        if not isinstance(payload, Mapping) or payload.get("data") is None:
            raise PayloadStructureError(
                "Invalid Magento data: missing data field", platform=self.platform
            )
        products = get_nested_value(payload, ["data", "products"])
        if products is None:
            raise PayloadStructureError(
                "Invalid Magento data: missing products field", platform=self.platform
            )

        items = products.get("items") if isinstance(products, Mapping) else None
        if items is None:
            return []
        if not isinstance(items, list):
            raise PayloadStructureError(
                "Invalid Magento data: products items must be an array",
                platform=self.platform,
            )
        return items

    def extract_pagination_info(self, payload: Dict[str, Any]) -> Optional[Dict[str, int]]:
        """Pagination counters of the response, None when there are none"""
        products = get_nested_value(payload, ["data", "products"])
        if not isinstance(products, Mapping):
            return None

        info: Dict[str, int] = {}
        total_count = _as_int(products.get("total_count"))
        if total_count is not None:
            info["total_count"] = total_count

        page_info = products.get("page_info")
        if isinstance(page_info, Mapping):
            for key in _PAGE_INFO_FIELDS:
                value = _as_int(page_info.get(key))
                if value is not None:
                    info[key] = value

        return info or None

    def transform_product(self, product: Mapping[str, Any]) -> Dict[str, Any]:
        for field in _REQUIRED_FIELDS:
            if product.get(field) is None:
                raise RequiredFieldError(field, "Magento")

        price = _price(product, "final_price") or DEFAULT_PRICE
        price_tax_excluded = _price(product, "final_price_excl_tax") or price
        hierarchy = from_parent_paths(product.get("categories"))

        overlay: Dict[str, Any] = {
            "id": to_string(product["id"]),
            "sku": to_string(product["sku"]),
            "price": price,
            "priceTaxExcluded": price_tax_excluded,
            "basePrice": price,
            "basePriceTaxExcluded": price_tax_excluded,
            "categories": hierarchy.paths,
            "inStock": self._in_stock(product),
        }

        full_url = product.get("full_url")
        if isinstance(full_url, str) and full_url:
            overlay["productUrl"] = full_url

        description = _html_text(product, "description")
        if description is not None:
            overlay["description"] = description

        description_short = _html_text(product, "short_description")
        if description_short is not None:
            overlay["descriptionShort"] = description_short

        brand = self._brand(product.get("attributes"))
        if brand is not None:
            overlay["brand"] = brand

        if hierarchy.default:
            overlay["categoryDefault"] = hierarchy.default

        image = product.get("image_optimized")
        if isinstance(image, str) and image:
            overlay["imageUrl"] = {"small": image, "medium": image}

        document = CanonicalProduct.build(overlay).to_document()
        # sku travels unchanged with the pass-through fields
        document.pop("sku", None)

        result = dict(product)
        result.update(document)
        return result

    def _brand(self, attributes: Any) -> Optional[str]:
        if not isinstance(attributes, list):
            return None
        for attribute in attributes:
            if not isinstance(attribute, Mapping) or attribute.get("code") != "manufacturer":
                continue
            value = attribute.get("value")
            if value is None:
                value = attribute.get("label")
            if isinstance(value, str) and value:
                return value
        return None

    def _in_stock(self, product: Mapping[str, Any]) -> bool:
        if product.get("is_in_stock") is not None:
            return bool(product["is_in_stock"])
        stock_status = product.get("stock_status")
        if isinstance(stock_status, str):
            return stock_status == "IN_STOCK"
        return False
