"""Application service: Remove From Cart use case.

Removing a product that is not in the cart is a no-op, but the cart is
still recalculated and saved.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.application.guards import require_product_id, require_user_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_pricing_service import CartPricingService

logger = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str) -> CartDTO:
        require_user_id(user_id)
        require_product_id(product_id)

        cart = self._cart_repo.get_by_user(user_id)
        if cart is None:
            raise EntityNotFoundError("Cart not found")

        cart.remove(product_id)

        CartPricingService(self._product_repo).recalculate(cart)
        self._cart_repo.save(cart)

        logger.info("Removed product from cart", user_id=user_id, product_id=product_id)
        return cart_to_dto(cart, self._product_repo)
