"""Abstract repository for Cart aggregate (one cart per user)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_user(self, user_id: str) -> Cart | None:
        """Return the user's cart, or None if the user has none yet."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist a new or updated cart, replacing any previous one for the user."""
