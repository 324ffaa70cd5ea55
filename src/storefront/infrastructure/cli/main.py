import click
from pydantic import ValidationError as SettingsError

from storefront.infrastructure.bootstrap import load_settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from storefront.infrastructure.cli.order_commands import (
    order_checkout,
    order_history,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_categories,
    product_list,
    product_remove,
    product_search,
    product_update,
)
from storefront.infrastructure.observability import configure_logging, get_logger


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront: cart, checkout and order history"""
    try:
        settings = load_settings()
    except SettingsError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")

    configure_logging(settings.log_format, settings.log_level)
    get_logger("cli").debug(
        "settings.loaded",
        data_dir=str(settings.data_dir),
        tax_rate=str(settings.tax_rate),
    )
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Browse and maintain the catalog."""


@cli.group()
def cart() -> None:
    """Manage a session's cart."""


@cli.group()
def order() -> None:
    """Check out and manage orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_categories)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_search)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
order.add_command(order_checkout)
order.add_command(order_history)
order.add_command(order_show)
order.add_command(order_status)
