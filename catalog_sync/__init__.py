"""
catalog-sync: normalization and validation of e-commerce catalog exports
"""

from catalog_sync.shared.constants import VERSION as __version__

__all__ = ["__version__"]
