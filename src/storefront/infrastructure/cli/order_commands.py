"""CLI commands for checkout and placed orders."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import (
    cart_repository,
    order_repository,
    pricing_engine,
)
from storefront.infrastructure.settings import StorefrontSettings


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Ship to:  {dto.shipping_address}")
    click.echo()
    click.echo(f"  {'Title':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.title:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>20}")
    click.echo(f"  {'Tax':<27} {dto.tax:>20}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("checkout")
@click.option("--session", "session_id", default="default", show_default=True,
              help="Cart session to check out.")
@click.option("--user", "user_id", required=True, help="Signed-in user ID.")
@click.option("--address", "shipping_address", required=True, help="Shipping address.")
@click.pass_obj
def order_checkout(
    settings: StorefrontSettings,
    session_id: str,
    user_id: str,
    shipping_address: str,
) -> None:
    """Place an order from the cart and empty it."""
    handler = PlaceOrderHandler(
        cart_repo=cart_repository(settings),
        order_repo=order_repository(settings),
        pricing=pricing_engine(settings),
    )

    try:
        dto = handler.handle(session_id, user_id, shipping_address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_id} placed. Total: {dto.total}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(settings: StorefrontSettings, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(settings))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("history")
@click.option("--user", "user_id", required=True, help="User whose orders to list.")
@click.pass_obj
def order_history(settings: StorefrontSettings, user_id: str) -> None:
    """List a user's orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository(settings))

    try:
        orders = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<30} {'Created':<22} {'Status':<10} {'Total':>10}")
    click.echo("-" * 75)
    for dto in orders:
        click.echo(
            f"{dto.order_id:<30} {dto.created_at:<22} {dto.status:<10} {dto.total:>10}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.argument(
    "status",
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
)
@click.pass_obj
def order_status(settings: StorefrontSettings, order_id: str, status: str) -> None:
    """Move an order to STATUS (confirmed, shipped, delivered, cancelled)."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository(settings))

    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} is now {status.lower()}.")
