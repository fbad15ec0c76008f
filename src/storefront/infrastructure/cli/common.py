"""Helpers shared by the CLI command modules."""

from __future__ import annotations

from typing import TypeVar

import click

from storefront.application.dto import CartItemSpec
from storefront.application.result import ServiceResult

T = TypeVar("T")


def unwrap(result: ServiceResult[T]) -> T:
    """Return the result's data or abort the command with its error."""
    if not result.ok:
        raise click.ClickException(f"{result.error} [{result.error_kind}]")
    return result.data  # type: ignore[return-value]


def parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '1:3,2:5' (product id : quantity) into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(CartItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs
