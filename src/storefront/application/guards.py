"""Argument checks shared by the handlers."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError


def require_user_id(user_id: str) -> str:
    if not user_id or not str(user_id).strip():
        raise ValidationError("User ID is required")
    return user_id


def require_product_id(product_id: str) -> str:
    if not product_id or not str(product_id).strip():
        raise ValidationError("Product ID is required")
    return product_id


def require_order_id(order_id: int | None) -> int:
    if order_id is None or isinstance(order_id, bool):
        raise ValidationError("Order ID is required")
    return order_id
