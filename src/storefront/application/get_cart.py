"""Application service: Get Cart use case (fetch or lazily create)."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.application.guards import require_user_id
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class GetCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> CartDTO:
        """Return the user's cart, persisting an empty one on first access."""
        require_user_id(user_id)

        cart = self._cart_repo.get_by_user(user_id)
        if cart is None:
            cart = Cart.empty(user_id)
            self._cart_repo.save(cart)
            logger.info("Created empty cart", user_id=user_id)

        return cart_to_dto(cart, self._product_repo)
