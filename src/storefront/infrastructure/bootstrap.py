"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    transactional_checkout: bool = False

    @staticmethod
    def from_env(data_dir: str | Path | None = None) -> Settings:
        """Build settings from the environment; explicit arguments win."""
        resolved = data_dir or os.getenv("STOREFRONT_DATA_DIR") or _DEFAULT_DATA_DIR
        transactional = os.getenv("STOREFRONT_TRANSACTIONAL_CHECKOUT", "").lower()
        return Settings(
            data_dir=Path(resolved),
            transactional_checkout=transactional in ("1", "true", "yes"),
        )


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def cart_repository(settings: Settings) -> JsonCartRepository:
    return JsonCartRepository(settings.data_dir / "carts.json")


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")
