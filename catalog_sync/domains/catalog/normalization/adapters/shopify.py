from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urlparse

from catalog_sync.core.exceptions import PayloadStructureError, RequiredFieldError
from catalog_sync.domains.catalog.models import CanonicalProduct
from catalog_sync.shared.constants import DEFAULT_PRICE, PLATFORM_SHOPIFY
from catalog_sync.shared.helpers import get_list, get_nested_value, is_number, strip_html
from ..base_adapter import BaseAdapter
from ..categories import from_type_and_tags

_NUMERIC_TAIL_RE = re.compile(r"/(\d+)$")


def extract_numeric_id(gid: Any) -> str:
    """``gid://shopify/Product/6843600694995`` -> ``6843600694995``.

    Query strings are ignored; ids that do not end in digits give ``""``.
    """
    if not gid or not isinstance(gid, str):
        return ""
    try:
        path = urlparse(gid).path
    except ValueError:
        return ""
    match = _NUMERIC_TAIL_RE.search(path or "")
    return match.group(1) if match else ""


def _required_scalar(product: Mapping[str, Any], field: str) -> str:
    value = product.get(field)
    if value is None or isinstance(value, (dict, list)):
        raise RequiredFieldError(
            field,
            "Shopify",
            message=f"Required field '{field}' is missing or not a scalar in Shopify data",
        )
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def _amount(product: Mapping[str, Any], bound: str) -> Optional[str]:
    amount = get_nested_value(product, ["priceRangeV2", bound, "amount"])
    return amount if isinstance(amount, str) else None


class ShopifyAdapter(BaseAdapter):
    """Shopify Admin GraphQL ``products`` connection -> canonical documents"""

    platform = PLATFORM_SHOPIFY

    def extract_items(self, payload: Dict[str, Any]) -> List[Any]:
        if not isinstance(payload, Mapping) or payload.get("data") is None:
            raise PayloadStructureError(
                "Invalid Shopify data: missing data field", platform=self.platform
            )
        products = get_nested_value(payload, ["data", "products"])
        if products is None:
            raise PayloadStructureError(
                "Invalid Shopify data: missing products field", platform=self.platform
            )

        edges = products.get("edges") if isinstance(products, Mapping) else None
        if edges is None:
            return []
        if not isinstance(edges, list):
            raise PayloadStructureError(
                "Invalid Shopify data: products edges must be an array",
                platform=self.platform,
            )
        return edges

    def unwrap_item(self, item: Any) -> Optional[Mapping[str, Any]]:
        if not isinstance(item, Mapping):
            return None
        node = item.get("node")
        return node if isinstance(node, Mapping) else None

    def item_id(self, product: Mapping[str, Any]) -> str:
        return extract_numeric_id(product.get("id"))

    def transform_product(self, product: Mapping[str, Any]) -> Dict[str, Any]:
        price = _amount(product, "minVariantPrice") or DEFAULT_PRICE
        base_price = _amount(product, "maxVariantPrice") or price
        hierarchy = from_type_and_tags(product.get("productType"), product.get("tags"))

        sku = get_nested_value(product, ["variants", "edges", 0, "node", "sku"])

        fields: Dict[str, Any] = {
            "id": extract_numeric_id(_required_scalar(product, "id")),
            "name": _required_scalar(product, "title"),
            "sku": sku if isinstance(sku, str) else "",
            "price": price,
            "basePrice": base_price,
            # Shopify prices are stored without tax
            "priceTaxExcluded": price,
            "basePriceTaxExcluded": base_price,
            "inStock": self._in_stock(product),
            "categoryDefault": hierarchy.default,
            "categories": hierarchy.paths,
            "variants": self._variants(product.get("variants")),
        }

        if isinstance(product.get("descriptionHtml"), str):
            fields["description"] = strip_html(product["descriptionHtml"])

        vendor = product.get("vendor")
        if isinstance(vendor, str) and vendor:
            fields["brand"] = vendor

        online_store_url = product.get("onlineStoreUrl")
        if isinstance(online_store_url, str) and online_store_url:
            fields["productUrl"] = online_store_url

        image_url = self._image_url(product.get("images"))
        if image_url:
            fields["imageUrl"] = image_url

        return CanonicalProduct.build(fields).to_document()

    def _in_stock(self, product: Mapping[str, Any]) -> bool:
        for edge in get_list(product.get("variants"), "edges"):
            if get_nested_value(edge, ["node", "availableForSale"]) is True:
                return True
        return False

    def _image_url(self, images: Any) -> Dict[str, str]:
        candidates = []
        for edge in get_list(images, "edges"):
            url = get_nested_value(edge, ["node", "url"])
            if isinstance(url, str) and url:
                width = get_nested_value(edge, ["node", "width"])
                candidates.append((float(width) if is_number(width) else 0, url))

        if not candidates:
            return {}

        # sorted() is stable, equal widths keep their source order
        candidates = sorted(candidates, key=lambda candidate: candidate[0])
        medium_index = len(candidates) // 2 if len(candidates) > 1 else 0
        return {"small": candidates[0][1], "medium": candidates[medium_index][1]}

    def _variants(self, variants: Any) -> List[Dict[str, Any]]:
        result = []
        for edge in get_list(variants, "edges"):
            node = edge.get("node") if isinstance(edge, Mapping) else None
            if not isinstance(node, Mapping) or node.get("id") is None:
                continue
            sku = node.get("sku")
            result.append(
                {
                    "id": extract_numeric_id(node["id"]),
                    "sku": sku if isinstance(sku, str) else "",
                    "attributes": self._options(node.get("selectedOptions")),
                }
            )
        return result

    def _options(self, selected_options: Any) -> List[Dict[str, str]]:
        if not isinstance(selected_options, list):
            return []
        attributes = []
        for option in selected_options:
            if not isinstance(option, Mapping):
                continue
            name, value = option.get("name"), option.get("value")
            if isinstance(name, str) and name and isinstance(value, str) and value:
                attributes.append({"name": name.lower(), "value": value})
        return attributes
