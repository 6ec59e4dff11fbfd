from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from catalog_sync.core.logging import get_logger
from catalog_sync.domains.catalog.models import (
    ItemError,
    ItemErrorType,
    TransformResult,
)

INVALID_STRUCTURE_MESSAGE = "Skipping product due to invalid item structure."


class BaseAdapter(ABC):
    """Abstract base for platform-specific catalog adapters.

    Implementations map a raw platform export into canonical product
    documents that comply with ``CanonicalProduct``. The base class owns the
    per-item isolation loop: one broken item never aborts its batch.
    """

    platform: str = ""

    def __init__(self):
        self.logger = get_logger(f"{__name__}.{self.platform or 'adapter'}")

    @abstractmethod
    def extract_items(self, payload: Dict[str, Any]) -> List[Any]:
        """Validate the top-level container and return the raw item list.

        Raises PayloadStructureError when the container is missing.
        """
        raise NotImplementedError

    @abstractmethod
    def transform_product(self, product: Mapping[str, Any]) -> Dict[str, Any]:
        """Convert one raw product to a canonical document."""
        raise NotImplementedError

    def unwrap_item(self, item: Any) -> Optional[Mapping[str, Any]]:
        """Product object carried by a list item, None when malformed"""
        if isinstance(item, Mapping):
            return item
        return None

    def item_id(self, product: Mapping[str, Any]) -> str:
        """Best-effort identifier used in error reports"""
        value = product.get("id")
        if value is None or isinstance(value, (dict, list)):
            return ""
        return str(value)

    def transform_batch(self, payload: Dict[str, Any]) -> TransformResult:
        """Transform every item, collecting per-item failures"""
        items = self.extract_items(payload)
        result = TransformResult()

        for index, item in enumerate(items):
            product = self.unwrap_item(item)
            if product is None:
                self._record_error(
                    result,
                    ItemError(
                        type=ItemErrorType.INVALID_STRUCTURE,
                        product_index=index,
                        product_id="",
                        message=INVALID_STRUCTURE_MESSAGE,
                    ),
                )
                continue

            try:
                result.products.append(self.transform_product(product))
            except Exception as e:
                self._record_error(
                    result,
                    ItemError(
                        type=ItemErrorType.TRANSFORMATION_ERROR,
                        product_index=index,
                        product_id=self.item_id(product),
                        message=str(e),
                        exception_kind=type(e).__name__,
                    ),
                )

        self.logger.info(
            "Catalog batch transformed",
            platform=self.platform,
            items=len(items),
            products=len(result.products),
            errors=len(result.errors),
        )
        return result

    def transform(self, payload: Dict[str, Any]) -> Any:
        return self.transform_batch(payload)

    def _record_error(self, result: TransformResult, error: ItemError) -> None:
        result.errors.append(error)
        self.logger.warning(
            "Skipping catalog item",
            platform=self.platform,
            error_type=error.type.value,
            product_index=error.product_index,
            product_id=error.product_id,
            error=error.message,
            exception_kind=error.exception_kind,
        )
