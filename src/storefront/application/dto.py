"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Amounts are
pre-formatted strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import CartStore, LineItem
from storefront.domain.model.order import OrderRecord
from storefront.domain.service.pricing import PricingEngine


@dataclass(frozen=True)
class LineItemDTO:
    """A single cart or order line as displayed to the user."""

    product_id: str
    title: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    session_id: str
    items: list[LineItemDTO]
    item_count: int
    subtotal: str
    tax: str
    total: str


@dataclass(frozen=True)
class OrderDTO:
    order_id: str
    user_id: str
    status: str
    items: list[LineItemDTO]
    subtotal: str
    tax: str
    total: str
    shipping_address: str
    created_at: str


# --- Mapping ------------------------------------------------------------------


def line_to_dto(item: LineItem) -> LineItemDTO:
    return LineItemDTO(
        product_id=item.product_id,
        title=item.title,
        quantity=item.quantity,
        unit_price=str(item.unit_price),
        line_total=str(item.line_total),
    )


def cart_to_dto(session_id: str, cart: CartStore, pricing: PricingEngine) -> CartDTO:
    lines = cart.snapshot()
    quote = pricing.quote(lines)
    return CartDTO(
        session_id=session_id,
        items=[line_to_dto(item) for item in lines],
        item_count=cart.item_count,
        subtotal=str(quote.subtotal),
        tax=str(quote.tax),
        total=str(quote.total),
    )


def order_to_dto(order: OrderRecord) -> OrderDTO:
    return OrderDTO(
        order_id=order.order_id,
        user_id=order.user_id,
        status=order.status.value,
        items=[line_to_dto(item) for item in order.items],
        subtotal=str(order.subtotal),
        tax=str(order.tax),
        total=str(order.total),
        shipping_address=order.shipping_address,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
