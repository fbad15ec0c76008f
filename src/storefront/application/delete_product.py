"""Application service: Delete Product use case.

Carts still referencing the product skip it in their totals; checking
out such a cart fails until the item is removed.
"""

from __future__ import annotations

import structlog

from storefront.application.guards import require_product_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        require_product_id(product_id)
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError("Product not found")
        logger.info("Product deleted", product_id=product_id)
