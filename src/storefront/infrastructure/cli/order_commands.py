"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.result import CREATED, execute
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import (
    Settings,
    cart_repository,
    order_repository,
    product_repository,
)
from storefront.infrastructure.cli.common import unwrap
from storefront.infrastructure.logging import add_context

user_option = click.option("--user", "user_id", required=True, help="User ID.")
order_id_option = click.option("--id", "order_id", required=True, type=int, help="Order ID.")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total_amount:>20}")


@click.command("checkout")
@user_option
@click.pass_obj
def order_checkout(settings: Settings, user_id: str) -> None:
    """Place an order from the user's cart and empty the cart."""
    add_context(user_id=user_id)
    handler = CreateOrderHandler(
        order_repo=order_repository(settings),
        cart_repo=cart_repository(settings),
        product_repo=product_repository(settings),
        transactional=settings.transactional_checkout,
    )
    dto = unwrap(execute(handler.handle, user_id, status_hint=CREATED))
    click.echo(f"Order #{dto.id} created  (status={dto.status})")
    _display_order(dto)


@click.command("list")
@user_option
@click.pass_obj
def order_list(settings: Settings, user_id: str) -> None:
    """List the user's orders, newest first."""
    add_context(user_id=user_id)
    handler = ListOrdersHandler(order_repo=order_repository(settings))
    orders = unwrap(execute(handler.handle, user_id))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<12} {'Items':>5} {'Total':>12}  Created")
    click.echo("-" * 58)
    for o in orders:
        click.echo(
            f"{o.id:<6} {o.status:<12} {len(o.items):>5} {o.total_amount:>12}  {o.created_at}"
        )


@click.command("show")
@user_option
@order_id_option
@click.pass_obj
def order_show(settings: Settings, user_id: str, order_id: int) -> None:
    """Show details of one of the user's orders."""
    add_context(user_id=user_id)
    handler = ShowOrderHandler(order_repo=order_repository(settings))
    _display_order(unwrap(execute(handler.handle, order_id, user_id)))


@click.command("status")
@user_option
@order_id_option
@click.option(
    "--to",
    "status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="New status.",
)
@click.pass_obj
def order_status(settings: Settings, user_id: str, order_id: int, status: str) -> None:
    """Change the status of a pending order."""
    add_context(user_id=user_id)
    handler = UpdateOrderStatusHandler(order_repo=order_repository(settings))
    dto = unwrap(execute(handler.handle, order_id, user_id, status))
    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("cancel")
@user_option
@order_id_option
@click.pass_obj
def order_cancel(settings: Settings, user_id: str, order_id: int) -> None:
    """Cancel a pending order."""
    add_context(user_id=user_id)
    handler = CancelOrderHandler(order_repo=order_repository(settings))
    unwrap(execute(handler.handle, order_id, user_id))
    click.echo(f"Order #{order_id} cancelled.")
