"""Application service: Add To Cart use case.

Adding a product that is already in the cart sums the quantities.  The
total is recalculated from live catalog prices before saving.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.application.guards import require_product_id, require_user_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_pricing_service import CartPricingService

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str, quantity: int = 1) -> CartDTO:
        require_user_id(user_id)
        require_product_id(product_id)
        qty = Quantity(quantity)

        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError("Product not found")

        cart = self._cart_repo.get_by_user(user_id) or Cart.empty(user_id)
        cart.add(product_id, qty)

        CartPricingService(self._product_repo).recalculate(cart)
        self._cart_repo.save(cart)

        logger.info(
            "Added product to cart",
            user_id=user_id,
            product_id=product_id,
            quantity=qty.value,
            total=str(cart.total_amount),
        )
        return cart_to_dto(cart, self._product_repo)
