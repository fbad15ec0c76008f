"""Application service: Clear Cart use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.application.guards import require_user_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class ClearCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> CartDTO:
        require_user_id(user_id)

        cart = self._cart_repo.get_by_user(user_id)
        if cart is None:
            raise EntityNotFoundError("Cart not found")

        cart.clear()
        self._cart_repo.save(cart)

        logger.info("Cleared cart", user_id=user_id)
        return cart_to_dto(cart, self._product_repo)
