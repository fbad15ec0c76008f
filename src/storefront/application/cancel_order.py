"""Application service: Cancel Order use case.

Same guard as a status update (the order must be PENDING) with the
destination fixed to CANCELLED.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.application.guards import require_order_id, require_user_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, user_id: str) -> OrderDTO:
        require_order_id(order_id)
        require_user_id(user_id)

        order = self._order_repo.get_by_id_and_user(order_id, user_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        order.cancel()
        self._order_repo.save(order)

        logger.info("Order cancelled", order_id=order_id, user_id=user_id)
        return order_to_dto(order)
