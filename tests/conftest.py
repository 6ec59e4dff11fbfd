"""
Shared sample payloads for the catalog sync test suite.
"""

import copy

import pytest


PRESTASHOP_PRODUCT = {
    "remoteId": "1807",
    "sku": "SNK-1807",
    "price": "59.99",
    "basePrice": "69.99",
    "priceTaxExcluded": "49.58",
    "basePriceTaxExcluded": "57.84",
    "formattedPrice": "59,99 €",
    "inStock": True,
    "localizedNames": {"en-US": "Sneakers", "lt-LT": "Sportiniai batai"},
    "brand": {"localizedNames": {"en-US": "Nike", "lt-LT": "Nike"}},
    "description": {
        "localizedValues": {
            "en-US": "<p>Light <b>running</b> shoe</p>",
            "lt-LT": "<p>Lengvas bėgimo batas</p>",
        }
    },
    "categories": {
        "lvl2": [
            {"localizedValues": {"path": {"en-US": "Men", "lt-LT": "Vyrams"}}},
        ],
        "lvl3": [
            {
                "localizedValues": {
                    "path": {"en-US": "Men > Shoes", "lt-LT": "Vyrams > Batai"}
                }
            },
        ],
    },
    "imageUrl": {
        "small": "https://prestashop.test/img/1807-small.jpg",
        "medium": "https://prestashop.test/img/1807-medium.jpg",
        "large": "https://prestashop.test/img/1807-large.jpg",
    },
    "productUrl": {
        "localizedValues": {
            "en-US": "https://prestashop.test/en/sneakers.html",
            "lt-LT": "https://prestashop.test/lt/sportiniai-batai.html",
        }
    },
    "variants": [
        {
            "remoteId": "1807-1",
            "sku": "SNK-1807-RED-42",
            "productUrl": {
                "localizedValues": {
                    "en-US": "https://prestashop.test/en/sneakers.html#/color-red",
                    "lt-LT": "https://prestashop.test/lt/sportiniai-batai.html#/spalva-raudona",
                }
            },
            "attributes": {
                "Color": {"localizedValues": {"en-US": "Red", "lt-LT": "Raudona"}},
                "Size": {"localizedValues": {"en-US": "42"}},
            },
        },
        {"sku": "ORPHAN"},
    ],
    "features": [
        {
            "localizedNames": {"en-US": "Material", "lt-LT": "Medžiaga"},
            "localizedValues": {"en-US": "Leather", "lt-LT": "Oda"},
        }
    ],
}


SHOPIFY_NODE = {
    "id": "gid://shopify/Product/6843600694995",
    "title": "Classic Tee",
    "descriptionHtml": "<p>Soft <strong>cotton</strong> tee</p>",
    "vendor": "Acme",
    "productType": "Shirts",
    "tags": ["Summer", "Shirts", "Cotton", "Summer"],
    "onlineStoreUrl": "https://shop.test/products/classic-tee",
    "priceRangeV2": {
        "minVariantPrice": {"amount": "19.99", "currencyCode": "EUR"},
        "maxVariantPrice": {"amount": "24.99", "currencyCode": "EUR"},
    },
    "images": {
        "edges": [
            {"node": {"url": "https://cdn.shop.test/tee-large.jpg", "width": 1200}},
            {"node": {"url": "https://cdn.shop.test/tee-small.jpg", "width": 200}},
            {"node": {"url": "https://cdn.shop.test/tee-medium.jpg", "width": 600}},
        ]
    },
    "variants": {
        "edges": [
            {
                "node": {
                    "id": "gid://shopify/ProductVariant/40001",
                    "sku": "TEE-S",
                    "availableForSale": False,
                    "selectedOptions": [
                        {"name": "Size", "value": "S"},
                        {"name": "Color", "value": ""},
                    ],
                }
            },
            {
                "node": {
                    "id": "gid://shopify/ProductVariant/40002",
                    "sku": "TEE-M",
                    "availableForSale": True,
                    "selectedOptions": [{"name": "Size", "value": "M"}],
                }
            },
        ]
    },
}


MAGENTO_ITEM = {
    "id": 42,
    "sku": "MG-42",
    "name": "Trail Backpack",
    "type_id": "simple",
    "full_url": "https://magento.test/trail-backpack.html",
    "description": {"html": "<p>Water&nbsp;resistant <em>backpack</em></p>"},
    "short_description": {"html": "<p>25L backpack</p>"},
    "attributes": [
        {"code": "color", "value": "Blue", "label": "Color"},
        {"code": "manufacturer", "value": None, "label": "Osprey"},
    ],
    "price_range": {
        "minimum_price": {
            "final_price": {"value": 89.9, "currency": "EUR"},
            "final_price_excl_tax": {"value": 74.3, "currency": "EUR"},
        }
    },
    "categories": [
        {"id": 10, "name": "Root", "level": 1, "path": "1/10"},
        {"id": 20, "name": "Sub", "level": 2, "path": "1/10/20"},
    ],
    "stock_status": "IN_STOCK",
    "image_optimized": "https://magento.test/media/backpack.webp",
}


@pytest.fixture
def prestashop_product():
    return copy.deepcopy(PRESTASHOP_PRODUCT)


@pytest.fixture
def prestashop_payload(prestashop_product):
    return {"products": [prestashop_product]}


@pytest.fixture
def shopify_node():
    return copy.deepcopy(SHOPIFY_NODE)


@pytest.fixture
def shopify_payload(shopify_node):
    return {"data": {"products": {"edges": [{"node": shopify_node}]}}}


@pytest.fixture
def magento_item():
    return copy.deepcopy(MAGENTO_ITEM)


@pytest.fixture
def magento_payload(magento_item):
    return {
        "data": {
            "products": {
                "items": [magento_item],
                "total_count": 1,
                "page_info": {"current_page": 1, "page_size": 20, "total_pages": 1},
            }
        }
    }
