"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import ProductDTO, ProductQuery
from storefront.application.list_products import ListProductsHandler
from storefront.application.result import CREATED, execute
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.infrastructure.bootstrap import Settings, product_repository
from storefront.infrastructure.cli.common import unwrap


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, help="Catalog category.")
@click.option("--image-url", default=None, help="Optional image URL.")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    description: str,
    price: str,
    category: str,
    image_url: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))
    dto = unwrap(
        execute(
            handler.handle,
            name=name,
            description=description,
            price=price,
            category=category,
            image_url=image_url,
            status_hint=CREATED,
        )
    )
    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price}")


@click.command("list")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--limit", default=10, type=int, show_default=True)
@click.option("--category", default=None, help="Only this category.")
@click.option("--search", default=None, help="Match name or description.")
@click.option("--sort", default=None, help="e.g. 'price,-name' (default: newest first).")
@click.pass_obj
def product_list(
    settings: Settings,
    page: int,
    limit: int,
    category: str | None,
    search: str | None,
    sort: str | None,
) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository(settings))
    query = ProductQuery(page=page, limit=limit, category=category, search=search, sort=sort)
    result = unwrap(execute(handler.handle, query))

    if not result.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<14} {'Price':>10}")
    click.echo("-" * 53)
    for p in result.products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<14} {p.price:>10}")
    click.echo(
        f"Page {result.current_page} of {result.total_pages} "
        f"({result.total_products} products)"
    )


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"Category:    {dto.category}")
    click.echo(f"Price:       {dto.price}")
    click.echo(f"Description: {dto.description}")
    if dto.image_url:
        click.echo(f"Image:       {dto.image_url}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: str) -> None:
    """Show details of a product."""
    handler = ShowProductHandler(product_repo=product_repository(settings))
    _display_product(unwrap(execute(handler.handle, product_id)))


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None)
@click.option("--description", default=None)
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", default=None)
@click.option("--image-url", default=None)
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    category: str | None,
    image_url: str | None,
) -> None:
    """Update a product's fields."""
    handler = UpdateProductHandler(product_repo=product_repository(settings))
    dto = unwrap(
        execute(
            handler.handle,
            product_id,
            name=name,
            description=description,
            price=price,
            category=category,
            image_url=image_url,
        )
    )
    click.echo(f"Product #{dto.id} updated")
    _display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository(settings))
    unwrap(execute(handler.handle, product_id))
    click.echo(f"Product #{product_id} deleted")
