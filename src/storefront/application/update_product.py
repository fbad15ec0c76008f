"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.application.guards import require_product_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        price: str | None = None,
        category: str | None = None,
        image_url: str | None = None,
    ) -> ProductDTO:
        """Update any subset of a product's fields.

        Existing orders are unaffected; they captured a price snapshot
        at checkout.
        """
        require_product_id(product_id)
        new_price = Money.of(price) if price is not None else None

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        product.update(
            name=name,
            description=description,
            price=new_price,
            category=category,
            image_url=image_url,
        )
        self._product_repo.save(product)

        logger.info("Product updated", product_id=product_id)
        return product_to_dto(product)
