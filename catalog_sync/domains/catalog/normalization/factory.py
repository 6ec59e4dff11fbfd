from __future__ import annotations

from typing import Dict, Type

from catalog_sync.shared.constants import (
    PLATFORM_MAGENTO,
    PLATFORM_PRESTASHOP,
    PLATFORM_SHOPIFY,
)
from .base_adapter import BaseAdapter
from .adapters.magento import MagentoAdapter
from .adapters.prestashop import PrestaShopAdapter
from .adapters.shopify import ShopifyAdapter


_REGISTRY: Dict[str, Type[BaseAdapter]] = {
    PLATFORM_PRESTASHOP: PrestaShopAdapter,
    PLATFORM_SHOPIFY: ShopifyAdapter,
    PLATFORM_MAGENTO: MagentoAdapter,
}


def get_adapter(platform: str) -> BaseAdapter:
    adapter_cls = _REGISTRY.get(platform.lower() if isinstance(platform, str) else platform)
    if not adapter_cls:
        raise ValueError(f"No adapter registered for platform={platform}")
    return adapter_cls()


def registered_platforms():
    return sorted(_REGISTRY)
