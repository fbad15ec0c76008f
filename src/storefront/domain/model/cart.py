"""Cart aggregate: one mutable cart per user.

The cart holds product references and quantities only.  Prices are
never stored on cart items; ``total_amount`` is derived from live
catalog prices by ``CartPricingService`` after every mutation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import Money, Quantity


@dataclass
class CartItem:
    product_id: str
    quantity: Quantity


@dataclass
class Cart:
    """Aggregate root for a user's shopping cart.

    Invariants:
    - at most one item per product (adding again sums the quantities)
    - every stored quantity is >= 1
    """

    user_id: str
    items: list[CartItem] = field(default_factory=list)
    total_amount: Money = field(default_factory=Money.zero)

    @staticmethod
    def empty(user_id: str) -> Cart:
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")
        return Cart(user_id=user_id)

    # --- Mutations ------------------------------------------------------------

    def add(self, product_id: str, quantity: Quantity) -> None:
        """Add *quantity* of a product, merging with an existing line."""
        existing = self._find(product_id)
        if existing is not None:
            existing.quantity = existing.quantity + quantity
        else:
            self.items.append(CartItem(product_id=product_id, quantity=quantity))

    def remove(self, product_id: str) -> None:
        """Drop a product from the cart.  Absent products are ignored."""
        self.items = [item for item in self.items if item.product_id != product_id]

    def set_quantity(self, product_id: str, quantity: Quantity) -> None:
        """Overwrite the quantity of a product already in the cart."""
        existing = self._find(product_id)
        if existing is None:
            raise EntityNotFoundError("Product not found in cart")
        existing.quantity = quantity

    def clear(self) -> None:
        self.items = []
        self.total_amount = Money.zero()

    # --- Queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.items

    def quantity_of(self, product_id: str) -> int:
        item = self._find(product_id)
        return item.quantity.value if item is not None else 0

    def _find(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
