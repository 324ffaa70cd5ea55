"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.list_categories import ListCategoriesHandler
from storefront.application.remove_product import RemoveProductHandler
from storefront.application.search_catalog import SearchCatalogHandler
from storefront.application.show_catalog import ShowCatalogHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import Product
from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.settings import StorefrontSettings


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID (SKU).")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", default="", help="Catalog category.")
@click.option("--description", default="", help="Longer product description.")
@click.pass_obj
def product_add(
    settings: StorefrontSettings,
    product_id: str,
    title: str,
    price: str,
    category: str,
    description: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(settings),
        currency=settings.currency,
    )

    try:
        product = handler.handle(
            product_id=product_id,
            title=title,
            price=price,
            category=category,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.title}' added at {product.price}")


@click.command("list")
@click.option("--category", default=None, help="Only show this category.")
@click.pass_obj
def product_list(settings: StorefrontSettings, category: str | None) -> None:
    """List products in the catalog."""
    handler = ShowCatalogHandler(product_repo=product_repository(settings))
    products = handler.handle(category)

    if not products:
        click.echo("No products found.")
        return

    _print_products(products)


@click.command("search")
@click.argument("term")
@click.pass_obj
def product_search(settings: StorefrontSettings, term: str) -> None:
    """Find products by title or description."""
    handler = SearchCatalogHandler(product_repo=product_repository(settings))

    try:
        products = handler.handle(term)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo(f"No products match '{term}'.")
        return
    _print_products(products)


@click.command("categories")
@click.pass_obj
def product_categories(settings: StorefrontSettings) -> None:
    """List the catalog's categories."""
    categories = ListCategoriesHandler(product_repo=product_repository(settings)).handle()

    if not categories:
        click.echo("No categories found.")
        return
    for category in categories:
        click.echo(category)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID (SKU).")
@click.option("--title", default=None, help="New title.")
@click.option("--price", default=None, help="New price (e.g. 15.00).")
@click.option("--category", default=None, help="New category.")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def product_update(
    settings: StorefrontSettings,
    product_id: str,
    title: str | None,
    price: str | None,
    category: str | None,
    description: str | None,
) -> None:
    """Change a product's catalog details."""
    handler = UpdateProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(
            product_id,
            title=title,
            price=price,
            category=category,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.title}' updated, now {product.price}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID (SKU).")
@click.pass_obj
def product_remove(settings: StorefrontSettings, product_id: str) -> None:
    """Take a product out of the catalog."""
    handler = RemoveProductHandler(product_repo=product_repository(settings))

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} removed")


def _print_products(products: list[Product]) -> None:
    click.echo(f"{'ID':<10} {'Title':<24} {'Category':<14} {'Price':>10}")
    click.echo("-" * 61)
    for p in products:
        click.echo(f"{p.id:<10} {p.title:<24} {p.category:<14} {str(p.price):>10}")
