"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        description: str,
        price: str,
        category: str,
        image_url: str | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            product_id=self._next_id(),
            name=name,
            description=description,
            price=Money.of(price),
            category=category,
            image_url=image_url,
        )
        self._product_repo.save(product)

        logger.info("Product added", product_id=product.id, price=str(product.price))
        return product_to_dto(product)

    def _next_id(self) -> str:
        # Ids not assigned by this handler may be non-numeric; skip them
        numeric_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        return str(max(numeric_ids, default=0) + 1)
