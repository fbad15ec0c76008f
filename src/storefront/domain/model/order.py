"""Order aggregate: created once per checkout, never deleted.

The Order owns its line items, which snapshot product name and price at
creation time.  After creation the only mutable field is ``status``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import InvalidStateError, ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, raw: str) -> OrderStatus:
        """Map a caller-supplied string to a status, rejecting unknown values."""
        if not raw:
            raise ValidationError("Status is required")
        try:
            return cls(raw)
        except ValueError:
            valid = ", ".join(status.value for status in cls)
            raise ValidationError(
                f"Invalid status. Valid statuses are: {valid}"
            ) from None


@dataclass(frozen=True)
class OrderLineItem:
    """A product, quantity and the price it was bought at."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # snapshot taken at checkout

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for a placed order.

    The state machine is deliberately permissive: while an order is
    PENDING its owner may move it to any status (PENDING included);
    once it has left PENDING no further change is accepted.
    """

    id: int | None
    user_id: str
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(user_id: str, items: list[OrderLineItem]) -> Order:
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(id=None, user_id=user_id, items=list(items))

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> None:
        if self.status != OrderStatus.PENDING:
            raise InvalidStateError(
                f"Cannot update order with status '{self.status.value}'. "
                f"Only pending orders can be modified."
            )
        self.status = new_status

    def cancel(self) -> None:
        if self.status != OrderStatus.PENDING:
            raise InvalidStateError(
                f"Cannot cancel order with status '{self.status.value}'. "
                f"Only pending orders can be cancelled."
            )
        self.status = OrderStatus.CANCELLED

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_terminal(self) -> bool:
        return self.status != OrderStatus.PENDING
