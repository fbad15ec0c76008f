"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from storefront.application.add_many_to_cart import AddManyToCartHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.get_cart import GetCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.result import execute
from storefront.application.update_cart_quantity import UpdateCartQuantityHandler
from storefront.infrastructure.bootstrap import (
    Settings,
    cart_repository,
    product_repository,
)
from storefront.infrastructure.cli.common import parse_items, unwrap
from storefront.infrastructure.logging import add_context

user_option = click.option("--user", "user_id", required=True, help="User ID.")


def _display_cart(dto: CartDTO) -> None:
    click.echo(f"Cart for {dto.user_id}")
    if not dto.items:
        click.echo("  (empty)")
    else:
        click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10}")
        click.echo(f"  {'-'*44}")
        for item in dto.items:
            if item.product is None:
                click.echo(f"  {item.product_id:<6} {'(unavailable)':<20} {item.quantity:>5} {'-':>10}")
            else:
                click.echo(
                    f"  {item.product_id:<6} {item.product.name:<20} "
                    f"{item.quantity:>5} {item.product.price:>10}"
                )
        click.echo(f"  {'-'*44}")
    click.echo(f"  {'Cart Total':<27} {dto.total_amount:>17}")


@click.command("show")
@user_option
@click.pass_obj
def cart_show(settings: Settings, user_id: str) -> None:
    """Show the user's cart (creates an empty one if needed)."""
    add_context(user_id=user_id)
    handler = GetCartHandler(cart_repository(settings), product_repository(settings))
    _display_cart(unwrap(execute(handler.handle, user_id)))


@click.command("add")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, type=int, show_default=True)
@click.pass_obj
def cart_add(settings: Settings, user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to the cart (quantities are summed)."""
    add_context(user_id=user_id)
    handler = AddToCartHandler(cart_repository(settings), product_repository(settings))
    _display_cart(unwrap(execute(handler.handle, user_id, product_id, quantity)))


@click.command("add-many")
@user_option
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def cart_add_many(settings: Settings, user_id: str, items: str) -> None:
    """Add several products at once; any invalid entry rejects them all."""
    add_context(user_id=user_id)
    specs = parse_items(items)
    handler = AddManyToCartHandler(cart_repository(settings), product_repository(settings))
    _display_cart(unwrap(execute(handler.handle, user_id, specs)))


@click.command("remove")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def cart_remove(settings: Settings, user_id: str, product_id: str) -> None:
    """Remove a product from the cart."""
    add_context(user_id=user_id)
    handler = RemoveFromCartHandler(cart_repository(settings), product_repository(settings))
    _display_cart(unwrap(execute(handler.handle, user_id, product_id)))


@click.command("set")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int)
@click.pass_obj
def cart_set(settings: Settings, user_id: str, product_id: str, quantity: int) -> None:
    """Overwrite the quantity of a product in the cart."""
    add_context(user_id=user_id)
    handler = UpdateCartQuantityHandler(
        cart_repository(settings), product_repository(settings)
    )
    _display_cart(unwrap(execute(handler.handle, user_id, product_id, quantity)))


@click.command("clear")
@user_option
@click.pass_obj
def cart_clear(settings: Settings, user_id: str) -> None:
    """Empty the cart."""
    add_context(user_id=user_id)
    handler = ClearCartHandler(cart_repository(settings), product_repository(settings))
    _display_cart(unwrap(execute(handler.handle, user_id)))
