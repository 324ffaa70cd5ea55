"""Cart aggregate: the session's live collection of line items.

A ``CartStore`` is created per session (or per test) and passed to
whoever needs it; there is no process-wide cart.  It performs no I/O:
loading and saving a cart is the job of a ``CartRepository``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

import structlog

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LineItem:
    """One product in a cart or order, with the price it was added at.

    Frozen so a snapshot handed out by the cart (or stored on an order)
    can never be used to mutate the live cart.
    """

    product_id: str
    title: str
    unit_price: Money
    quantity: int

    def __post_init__(self) -> None:
        if not self.product_id or not str(self.product_id).strip():
            raise ValidationError("Line item product id is required")
        Quantity(self.quantity)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity

    @staticmethod
    def from_product(product: Product, quantity: int = 1) -> LineItem:
        return LineItem(
            product_id=product.id,
            title=product.title,
            unit_price=product.price,  # price snapshot
            quantity=quantity,
        )


class CartStore:
    """Ordered line items, unique by product id.

    Invariants:
    - no two lines share a ``product_id``
    - every stored line has ``quantity >= 1``
    """

    def __init__(self) -> None:
        # dicts keep insertion order, which is the display order
        self._lines: dict[str, LineItem] = {}

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: int = 1) -> None:
        """Add ``quantity`` units of ``product``, merging with an existing line.

        A non-positive quantity is ignored and the cart is left unchanged.
        """
        if quantity <= 0:
            log.warning(
                "cart.add_ignored", product_id=product.id, quantity=quantity
            )
            return

        existing = self._lines.get(product.id)
        if existing is not None:
            self._lines[product.id] = replace(
                existing, quantity=existing.quantity + quantity
            )
        else:
            self._lines[product.id] = LineItem.from_product(product, quantity)

    def remove_item(self, product_id: str) -> None:
        """Remove the line for ``product_id``; absent ids are a no-op."""
        self._lines.pop(product_id, None)

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Overwrite a line's quantity; ``quantity <= 0`` removes the line."""
        if quantity <= 0:
            self.remove_item(product_id)
            return

        existing = self._lines.get(product_id)
        if existing is None:
            return
        self._lines[product_id] = replace(existing, quantity=quantity)

    def clear(self) -> None:
        self._lines.clear()

    # --- Queries --------------------------------------------------------------

    def snapshot(self) -> list[LineItem]:
        """Return a copy of the current lines, in display order."""
        return list(self._lines.values())

    def get(self, product_id: str) -> LineItem | None:
        return self._lines.get(product_id)

    @property
    def item_count(self) -> int:
        """Total units across all lines (the badge shown next to the cart)."""
        return sum(line.quantity for line in self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def restore(items: Iterable[LineItem]) -> CartStore:
        """Rebuild a cart from a snapshot (e.g. one loaded from session storage).

        Lines sharing a product id are merged so the uniqueness invariant
        holds even for a hand-edited snapshot.
        """
        cart = CartStore()
        for item in items:
            existing = cart._lines.get(item.product_id)
            if existing is not None:
                cart._lines[item.product_id] = replace(
                    existing, quantity=existing.quantity + item.quantity
                )
            else:
                cart._lines[item.product_id] = item
        return cart
