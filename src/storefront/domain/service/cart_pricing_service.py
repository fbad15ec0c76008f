"""Domain service: Cart Pricing.

A cart's total is never an independent source of truth.  Every mutation
ends with a full recalculation that re-reads the *current* price of each
product from the catalog, so a price edit elsewhere shows up in the cart
the next time it changes.  Nothing is cached between calls.
"""

from __future__ import annotations

import structlog

from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CartPricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def recalculate(self, cart: Cart) -> Money:
        """Set ``cart.total_amount`` to the sum of live price x quantity.

        Products that have disappeared from the catalog contribute
        nothing; checkout is where a missing product becomes an error.
        """
        total = Money.zero()
        for item in cart.items:
            product = self._product_repo.get_by_id(item.product_id)
            if product is None:
                logger.warning(
                    "Cart references missing product",
                    user_id=cart.user_id,
                    product_id=item.product_id,
                )
                continue
            total = total + product.price * item.quantity.value
        cart.total_amount = total
        return total
