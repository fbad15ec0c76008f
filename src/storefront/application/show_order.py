"""Application service: Show Order use case (query).

Ownership is part of the lookup itself: another user's order and a
nonexistent order produce the same "not found".
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.application.guards import require_order_id, require_user_id
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, user_id: str) -> OrderDTO:
        require_order_id(order_id)
        require_user_id(user_id)

        order = self._order_repo.get_by_id_and_user(order_id, user_id)
        if order is None:
            raise EntityNotFoundError("Order not found")
        return order_to_dto(order)
