"""Application service: Update Cart Quantity use case.

Overwrites (does not add to) the quantity of a product already in the
cart.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.application.guards import require_product_id, require_user_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_pricing_service import CartPricingService

logger = structlog.get_logger(__name__)


class UpdateCartQuantityHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str, quantity: int) -> CartDTO:
        require_user_id(user_id)
        require_product_id(product_id)
        qty = Quantity(quantity)

        cart = self._cart_repo.get_by_user(user_id)
        if cart is None:
            raise EntityNotFoundError("Cart not found")

        cart.set_quantity(product_id, qty)

        CartPricingService(self._product_repo).recalculate(cart)
        self._cart_repo.save(cart)

        logger.info(
            "Updated cart quantity",
            user_id=user_id,
            product_id=product_id,
            quantity=qty.value,
        )
        return cart_to_dto(cart, self._product_repo)
