"""Application service: Bulk Add To Cart use case.

Uses a two-phase approach:
  Phase 1: validate every entry (positive quantity, product exists).
            Any failure rejects the whole batch before the cart is read.
  Phase 2: apply all entries, recalculate once, save once.

The two phases are not isolated from concurrent catalog changes: a
product deleted between them is still added.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, CartItemSpec, cart_to_dto
from storefront.application.guards import require_user_id
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_pricing_service import CartPricingService

logger = structlog.get_logger(__name__)


class AddManyToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, specs: list[CartItemSpec]) -> CartDTO:
        require_user_id(user_id)
        if not specs:
            raise ValidationError("Products list is required and cannot be empty")

        # Phase 1: validate every entry before touching the cart
        entries: list[tuple[str, Quantity]] = []
        for spec in specs:
            if not spec.product_id:
                raise ValidationError("Each product must have a productId")
            try:
                qty = Quantity(spec.quantity)
            except ValidationError:
                raise ValidationError(
                    "Each product quantity must be greater than 0"
                ) from None
            if self._product_repo.get_by_id(spec.product_id) is None:
                raise EntityNotFoundError(
                    f"Product with ID {spec.product_id} not found"
                )
            entries.append((spec.product_id, qty))

        # Phase 2: apply, recalculate and persist once
        cart = self._cart_repo.get_by_user(user_id) or Cart.empty(user_id)
        for product_id, qty in entries:
            cart.add(product_id, qty)

        CartPricingService(self._product_repo).recalculate(cart)
        self._cart_repo.save(cart)

        logger.info(
            "Added products to cart",
            user_id=user_id,
            entries=len(entries),
            total=str(cart.total_amount),
        )
        return cart_to_dto(cart, self._product_repo)
