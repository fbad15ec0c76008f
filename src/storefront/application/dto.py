"""Data Transfer Objects — plain containers that cross layer boundaries.

Request DTOs are what the outer layer hands in; response DTOs are what it
gets back.  Neither exposes domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

# --- Requests ------------------------------------------------------------------


@dataclass(frozen=True)
class CartItemSpec:
    """Input: one entry of a bulk add (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ProductQuery:
    """Input: catalog listing filters."""

    page: int = 1
    limit: int = 10
    category: str | None = None
    search: str | None = None
    sort: str | None = None


# --- Responses -----------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str  # formatted, e.g. "$15.00"
    category: str
    image_url: str | None
    created_at: str


@dataclass(frozen=True)
class ProductPageDTO:
    products: list[ProductDTO]
    total_products: int
    total_pages: int
    current_page: int


@dataclass(frozen=True)
class CartItemDTO:
    """A cart line with its product resolved (None if since deleted)."""

    product_id: str
    quantity: int
    product: ProductDTO | None


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    items: list[CartItemDTO]
    total_amount: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: str
    status: str
    items: list[OrderLineItemDTO]
    total_amount: str
    created_at: str


# --- Mapping -------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        category=product.category,
        image_url=product.image_url,
        created_at=product.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def cart_to_dto(cart: Cart, product_repo: ProductRepository) -> CartDTO:
    """Expand every product reference to the full product record."""
    items = []
    for item in cart.items:
        product = product_repo.get_by_id(item.product_id)
        items.append(
            CartItemDTO(
                product_id=item.product_id,
                quantity=item.quantity.value,
                product=product_to_dto(product) if product is not None else None,
            )
        )
    return CartDTO(
        user_id=cart.user_id,
        items=items,
        total_amount=str(cart.total_amount),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total_amount=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
