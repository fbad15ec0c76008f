"""Application service: Create Order (checkout) use case.

Converts the user's cart into a PENDING order.  This is the one place a
price snapshot is taken: each line item records the product's price at
this instant, so later catalog edits never touch the order.

Placing an order is two writes (order, then emptied cart) with no
transaction around them.  By default a failure of the second write
leaves the order placed and the cart still full.  With
``transactional=True`` the emptied cart is written first and restored
if the order cannot be saved, so both writes land or neither does.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.application.guards import require_user_id
from storefront.domain.exceptions import EntityNotFoundError, InvalidStateError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        transactional: bool = False,
    ) -> None:
        self._order_repo = order_repo
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._transactional = transactional

    def handle(self, user_id: str) -> OrderDTO:
        """Place an order from the user's cart.

        Steps:
        1. Reject a missing or empty cart.
        2. Resolve each cart item to its product (fail if any is gone).
        3. Build line items with *current* prices (snapshot).
        4. Persist the order and empty the cart.
        """
        require_user_id(user_id)

        cart = self._cart_repo.get_by_user(user_id)
        if cart is None or cart.is_empty:
            raise InvalidStateError("Cart is empty")

        line_items: list[OrderLineItem] = []
        for item in cart.items:
            product = self._product_repo.get_by_id(item.product_id)
            if product is None:
                raise EntityNotFoundError(f"Product not found: {item.product_id}")
            line_items.append(
                OrderLineItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=item.quantity,
                    unit_price=product.price,  # <-- price snapshot
                )
            )

        order = Order.create(user_id=user_id, items=line_items)

        if self._transactional:
            self._place_all_or_nothing(order, cart)
        else:
            self._place(order, cart)

        logger.info(
            "Order placed",
            user_id=user_id,
            order_id=order.id,
            line_items=len(order.items),
            total=str(order.total),
        )
        return order_to_dto(order)

    def _place(self, order: Order, cart: Cart) -> None:
        self._order_repo.save(order)
        # No compensation: if this save fails the order stays placed.
        cart.clear()
        self._cart_repo.save(cart)

    def _place_all_or_nothing(self, order: Order, cart: Cart) -> None:
        original_items = list(cart.items)
        original_total = cart.total_amount

        cart.clear()
        self._cart_repo.save(cart)
        try:
            self._order_repo.save(order)
        except Exception:
            cart.items = original_items
            cart.total_amount = original_total
            self._cart_repo.save(cart)
            logger.warning("Order save failed, cart restored", user_id=cart.user_id)
            raise
