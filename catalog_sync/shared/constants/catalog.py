"""
Catalog normalization constants
"""

# Locale whose fields are emitted without a suffix
DEFAULT_LOCALE = "en-US"

# Separator used in flattened category paths ("Men > Shoes > Sneakers")
HIERARCHY_SEPARATOR = " > "

# Image size keys understood by the remote index
IMAGE_SIZE_KEYS = ("small", "medium")

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "webp", "svg")

DEFAULT_PRICE = "0.00"

# Per-item error types
ERROR_TRANSFORMATION = "transformation_error"
ERROR_INVALID_STRUCTURE = "invalid_structure"

PLATFORM_PRESTASHOP = "prestashop"
PLATFORM_SHOPIFY = "shopify"
PLATFORM_MAGENTO = "magento"

__all__ = [
    "DEFAULT_LOCALE",
    "HIERARCHY_SEPARATOR",
    "IMAGE_SIZE_KEYS",
    "IMAGE_EXTENSIONS",
    "DEFAULT_PRICE",
    "ERROR_TRANSFORMATION",
    "ERROR_INVALID_STRUCTURE",
    "PLATFORM_PRESTASHOP",
    "PLATFORM_SHOPIFY",
    "PLATFORM_MAGENTO",
]
