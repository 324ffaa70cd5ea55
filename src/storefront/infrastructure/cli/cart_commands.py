"""CLI commands for the session cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.dto import CartDTO
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart import (
    ClearCartHandler,
    RemoveFromCartHandler,
    SetCartQuantityHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_repository,
    pricing_engine,
    product_repository,
)
from storefront.infrastructure.settings import StorefrontSettings

session_option = click.option(
    "--session", "session_id", default="default", show_default=True,
    help="Cart session identifier.",
)


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"Cart '{dto.session_id}'  ({dto.item_count} items)")
    click.echo()
    click.echo(f"  {'ID':<10} {'Title':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*58}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<10} {item.title:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*58}")
    click.echo(f"  {'Subtotal':<37} {dto.subtotal:>20}")
    click.echo(f"  {'Tax':<37} {dto.tax:>20}")
    click.echo(f"  {'Total':<37} {dto.total:>20}")


@click.command("add")
@session_option
@click.option("--product", "product_id", required=True, help="Product ID to add.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@click.pass_obj
def cart_add(
    settings: StorefrontSettings, session_id: str, product_id: str, quantity: int
) -> None:
    """Add a product to the cart (merges with an existing line)."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(settings),
        product_repo=product_repository(settings),
        pricing=pricing_engine(settings),
    )

    try:
        dto = handler.handle(session_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@session_option
@click.option("--product", "product_id", required=True, help="Product ID to remove.")
@click.pass_obj
def cart_remove(settings: StorefrontSettings, session_id: str, product_id: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveFromCartHandler(
        cart_repo=cart_repository(settings), pricing=pricing_engine(settings)
    )

    try:
        dto = handler.handle(session_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("set")
@session_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
@click.pass_obj
def cart_set(
    settings: StorefrontSettings, session_id: str, product_id: str, quantity: int
) -> None:
    """Set the quantity of a product already in the cart."""
    handler = SetCartQuantityHandler(
        cart_repo=cart_repository(settings), pricing=pricing_engine(settings)
    )

    try:
        dto = handler.handle(session_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("show")
@session_option
@click.pass_obj
def cart_show(settings: StorefrontSettings, session_id: str) -> None:
    """Show the cart with subtotal, tax and total."""
    handler = ShowCartHandler(
        cart_repo=cart_repository(settings), pricing=pricing_engine(settings)
    )

    try:
        dto = handler.handle(session_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("clear")
@session_option
@click.pass_obj
def cart_clear(settings: StorefrontSettings, session_id: str) -> None:
    """Empty the cart."""
    ClearCartHandler(cart_repo=cart_repository(settings)).handle(session_id)
    click.echo("Cart cleared.")
