"""Application service: List Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.application.guards import require_user_id
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str) -> list[OrderDTO]:
        """Return the user's orders, newest first."""
        require_user_id(user_id)
        return [order_to_dto(order) for order in self._order_repo.list_by_user(user_id)]
