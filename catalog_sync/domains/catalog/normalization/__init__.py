from .base_adapter import BaseAdapter
from .categories import (
    CategoryHierarchy,
    from_leveled_buckets,
    from_parent_paths,
    from_type_and_tags,
)
from .factory import get_adapter, registered_platforms
from .locale import (
    expand_localized,
    first_available,
    localized_field_name,
    value_for_locale,
)
from .adapters import MagentoAdapter, PrestaShopAdapter, ShopifyAdapter

__all__ = [
    "BaseAdapter",
    "CategoryHierarchy",
    "from_leveled_buckets",
    "from_parent_paths",
    "from_type_and_tags",
    "get_adapter",
    "registered_platforms",
    "expand_localized",
    "first_available",
    "localized_field_name",
    "value_for_locale",
    "MagentoAdapter",
    "PrestaShopAdapter",
    "ShopifyAdapter",
]
