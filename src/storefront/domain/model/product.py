"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: prices change, products are added to and removed from the
catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from urllib.parse import urlparse

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

MIN_NAME_LENGTH = 2
PRICE_DECIMAL_PLACES = 2


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products so every field is
    validated.  The ``__init__`` stays simple so the repository can
    reconstitute persisted products as they are.
    """

    id: str
    name: str
    description: str
    price: Money
    category: str
    image_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        product_id: str,
        name: str,
        description: str,
        price: Money,
        category: str,
        image_url: str | None = None,
    ) -> Product:
        return Product(
            id=product_id,
            name=_require_name(name),
            description=_require_text(description, "description"),
            price=_require_positive(price),
            category=_require_text(category, "category"),
            image_url=_check_image_url(image_url),
        )

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        price: Money | None = None,
        category: str | None = None,
        image_url: str | None = None,
    ) -> None:
        """Apply a partial update; ``None`` leaves a field untouched.

        Placed orders are unaffected because their line items carry a
        price snapshot.  Carts pick the new price up on their next
        recalculation.
        """
        if name is not None:
            self.name = _require_name(name)
        if description is not None:
            self.description = _require_text(description, "description")
        if price is not None:
            self.price = _require_positive(price)
        if category is not None:
            self.category = _require_text(category, "category")
        if image_url is not None:
            self.image_url = _check_image_url(image_url)


def _require_name(name: str) -> str:
    if not name or len(name.strip()) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Product name must be at least {MIN_NAME_LENGTH} characters"
        )
    return name.strip()


def _require_text(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Product {field_name} is required")
    return value.strip()


def _require_positive(price: Money) -> Money:
    if not price.is_positive:
        raise ValidationError("Product price must be greater than 0")
    if price.amount.normalize().as_tuple().exponent < -PRICE_DECIMAL_PLACES:
        raise ValidationError(
            f"Product price cannot have more than {PRICE_DECIMAL_PLACES} decimal places"
        )
    return price


def _check_image_url(image_url: str | None) -> str | None:
    if image_url is None:
        return None
    parsed = urlparse(image_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Product image_url must be a valid URI, got {image_url!r}")
    return image_url
