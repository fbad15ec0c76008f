"""Application service: List Products use case (query).

Supports filtering by category, case-insensitive search over name and
description, multi-field sorting (``"price,-name"``) and pagination.
"""

from __future__ import annotations

import math

from storefront.application.dto import ProductDTO, ProductPageDTO, ProductQuery, product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

MAX_LIMIT = 100

_SORT_KEYS = {
    "name": lambda p: p.name.lower(),
    "price": lambda p: p.price.amount,
    "category": lambda p: p.category.lower(),
    "created_at": lambda p: p.created_at,
}


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: ProductQuery | None = None) -> ProductPageDTO:
        query = query or ProductQuery()
        if query.page < 1:
            raise ValidationError("Page must be greater than 0")
        if query.limit < 1 or query.limit > MAX_LIMIT:
            raise ValidationError(f"Limit must be between 1 and {MAX_LIMIT}")

        products = [p for p in self._product_repo.list_all() if _matches(p, query)]
        products = _sorted(products, query.sort or "-created_at")

        start = (query.page - 1) * query.limit
        page: list[ProductDTO] = [
            product_to_dto(p) for p in products[start:start + query.limit]
        ]
        return ProductPageDTO(
            products=page,
            total_products=len(products),
            total_pages=math.ceil(len(products) / query.limit),
            current_page=query.page,
        )


def _matches(product: Product, query: ProductQuery) -> bool:
    if query.category and product.category != query.category:
        return False
    if query.search:
        needle = query.search.lower()
        if needle not in product.name.lower() and needle not in product.description.lower():
            return False
    return True


def _sorted(products: list[Product], sort: str) -> list[Product]:
    """Apply a comma-separated sort string, first field most significant."""
    fields = [f.strip() for f in sort.split(",") if f.strip()]
    # Stable sorts applied from least to most significant field
    for raw in reversed(fields):
        descending = raw.startswith("-")
        name = raw[1:] if descending else raw
        key = _SORT_KEYS.get(name)
        if key is None:
            raise ValidationError(
                f"Cannot sort by '{name}'. Valid fields are: {', '.join(_SORT_KEYS)}"
            )
        products = sorted(products, key=key, reverse=descending)
    return products
