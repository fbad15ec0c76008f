"""Application service: Update Order Status use case.

Only a PENDING order can change status, and from PENDING any of the
five statuses is accepted (including PENDING itself).  No ordering is
imposed among processing, shipped and delivered.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.application.guards import require_order_id, require_user_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, user_id: str, status: str) -> OrderDTO:
        require_order_id(order_id)
        require_user_id(user_id)
        new_status = OrderStatus.parse(status)

        order = self._order_repo.get_by_id_and_user(order_id, user_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        previous = order.status
        order.change_status(new_status)
        self._order_repo.save(order)

        logger.info(
            "Order status changed",
            order_id=order_id,
            user_id=user_id,
            from_status=previous.value,
            to_status=new_status.value,
        )
        return order_to_dto(order)
