import pytest

from catalog_sync.core.exceptions import PayloadStructureError
from catalog_sync.domains.catalog.models import ItemErrorType
from catalog_sync.domains.catalog.normalization import ShopifyAdapter
from catalog_sync.domains.catalog.normalization.adapters import extract_numeric_id


class TestExtractNumericId:
    @pytest.mark.parametrize(
        "gid, expected",
        [
            ("gid://shopify/Product/6843600694995", "6843600694995"),
            ("gid://shopify/ProductVariant/123?foo=bar", "123"),
            ("gid://shopify/Product/abc", ""),
            ("not-a-gid", ""),
            ("", ""),
            (None, ""),
        ],
    )
    def test_extract_numeric_id(self, gid, expected):
        assert extract_numeric_id(gid) == expected


class TestShopifyAdapter:
    """Shopify GraphQL products -> canonical documents"""

    @pytest.fixture
    def adapter(self):
        return ShopifyAdapter()

    @pytest.fixture
    def product(self, adapter, shopify_payload):
        result = adapter.transform(shopify_payload)
        assert result.errors == []
        assert len(result.products) == 1
        return result.products[0]

    def test_core_fields(self, product):
        assert product["id"] == "6843600694995"
        assert product["name"] == "Classic Tee"
        assert product["sku"] == "TEE-S"
        assert product["brand"] == "Acme"
        assert product["description"] == "Soft cotton tee"
        assert product["productUrl"] == "https://shop.test/products/classic-tee"

    def test_prices(self, product):
        assert product["price"] == "19.99"
        assert product["basePrice"] == "24.99"
        assert product["priceTaxExcluded"] == "19.99"
        assert product["basePriceTaxExcluded"] == "24.99"

    def test_base_price_falls_back_to_min_price(self, adapter, shopify_payload, shopify_node):
        del shopify_node["priceRangeV2"]["maxVariantPrice"]
        product = adapter.transform(shopify_payload).products[0]
        assert product["basePrice"] == "19.99"

    def test_missing_price_range_defaults(self, adapter, shopify_payload, shopify_node):
        del shopify_node["priceRangeV2"]
        product = adapter.transform(shopify_payload).products[0]
        assert product["price"] == "0.00"
        assert product["basePrice"] == "0.00"

    def test_in_stock_when_any_variant_is_available(
        self, adapter, shopify_payload, shopify_node, product
    ):
        assert product["inStock"] is True

        for edge in shopify_node["variants"]["edges"]:
            edge["node"]["availableForSale"] = False
        assert adapter.transform(shopify_payload).products[0]["inStock"] is False

    def test_categories_from_type_and_tags(self, product):
        assert product["categoryDefault"] == "Shirts"
        assert product["categories"] == ["Shirts", "Summer", "Cotton"]

    def test_images_selected_by_width(self, product):
        assert product["imageUrl"] == {
            "small": "https://cdn.shop.test/tee-small.jpg",
            "medium": "https://cdn.shop.test/tee-medium.jpg",
        }

    def test_single_image_fills_both_sizes(self, adapter, shopify_payload, shopify_node):
        shopify_node["images"]["edges"] = [
            {"node": {"url": "https://cdn.shop.test/only.png", "width": None}}
        ]
        product = adapter.transform(shopify_payload).products[0]
        assert product["imageUrl"] == {
            "small": "https://cdn.shop.test/only.png",
            "medium": "https://cdn.shop.test/only.png",
        }

    def test_no_images(self, adapter, shopify_payload, shopify_node):
        shopify_node["images"] = {"edges": []}
        assert "imageUrl" not in adapter.transform(shopify_payload).products[0]

    def test_variants(self, product):
        assert product["variants"] == [
            {"id": "40001", "sku": "TEE-S", "attributes": [{"name": "size", "value": "S"}]},
            {"id": "40002", "sku": "TEE-M", "attributes": [{"name": "size", "value": "M"}]},
        ]

    def test_missing_data_is_fatal(self, adapter):
        with pytest.raises(PayloadStructureError, match="missing data field"):
            adapter.transform({})

    def test_missing_products_is_fatal(self, adapter):
        with pytest.raises(PayloadStructureError, match="missing products field"):
            adapter.transform({"data": {}})

    def test_missing_edges_is_empty_result(self, adapter):
        result = adapter.transform({"data": {"products": {}}})
        assert result.products == []
        assert result.errors == []

    def test_non_list_edges_is_fatal(self, adapter):
        with pytest.raises(PayloadStructureError, match="edges must be an array"):
            adapter.transform({"data": {"products": {"edges": "nope"}}})

    def test_batch_isolation(self, adapter, shopify_node):
        broken = {"id": "gid://shopify/Product/777"}
        payload = {
            "data": {
                "products": {
                    "edges": [
                        {"node": shopify_node},
                        {"node": broken},
                        {"cursor": "abc"},
                        {"node": shopify_node},
                    ]
                }
            }
        }
        result = adapter.transform(payload)

        assert result.has_errors
        assert len(result.products) == 2
        assert len(result.errors) == 2

        missing_title = result.errors[0]
        assert missing_title.type == ItemErrorType.TRANSFORMATION_ERROR
        assert missing_title.product_index == 1
        assert missing_title.product_id == "777"
        assert "title" in missing_title.message

        assert result.errors[1].type == ItemErrorType.INVALID_STRUCTURE
        assert result.errors[1].product_index == 2

    def test_malformed_gid_is_not_an_error(self, adapter, shopify_payload, shopify_node):
        shopify_node["id"] = "gid://shopify/Product/not-numeric"
        result = adapter.transform(shopify_payload)
        assert result.errors == []
        assert result.products[0]["id"] == ""

    def test_numeric_string_widths_are_compared_as_numbers(
        self, adapter, shopify_payload, shopify_node
    ):
        shopify_node["images"]["edges"] = [
            {"node": {"url": "https://cdn.shop.test/a.jpg", "width": 800}},
            {"node": {"url": "https://cdn.shop.test/b.jpg", "width": "100"}},
            {"node": {"url": "https://cdn.shop.test/c.jpg", "width": 50}},
        ]
        product = adapter.transform(shopify_payload).products[0]
        assert product["imageUrl"] == {
            "small": "https://cdn.shop.test/c.jpg",
            "medium": "https://cdn.shop.test/b.jpg",
        }

    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_minimal_items_never_fail(self, adapter, count):
        edges = [
            {"node": {"id": f"gid://shopify/Product/{i}", "title": f"Item {i}"}}
            for i in range(count)
        ]
        result = adapter.transform({"data": {"products": {"edges": edges}}})
        assert len(result.products) == count
        assert result.errors == []
