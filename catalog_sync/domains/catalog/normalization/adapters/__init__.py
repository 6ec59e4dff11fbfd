from .magento import MagentoAdapter
from .prestashop import PrestaShopAdapter
from .shopify import ShopifyAdapter, extract_numeric_id

__all__ = ["MagentoAdapter", "PrestaShopAdapter", "ShopifyAdapter", "extract_numeric_id"]
