"""OrderRecord: the committed result of a checkout.

Records are immutable.  The fulfillment collaborator moves an order
through its lifecycle with ``transition_to``, which returns a new record
that differs only in ``status``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import LineItem
from storefront.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# pending -> confirmed -> shipped -> delivered, or pending|confirmed -> cancelled
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class OrderRecord:
    """A placed order.

    Frozen: a status change produces a new record via ``transition_to``.

    Build new records with ``storefront.domain.service.order_assembler``;
    the plain constructor exists so repositories can reconstitute stored
    orders without re-running checkout validation.
    """

    order_id: str
    user_id: str
    items: tuple[LineItem, ...]
    subtotal: Money
    tax: Money
    total: Money
    shipping_address: str
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    # --- State transitions ----------------------------------------------------

    def transition_to(self, new_status: OrderStatus) -> OrderRecord:
        """Return a copy of this order in ``new_status``."""
        if new_status not in ALLOWED_TRANSITIONS[self.status]:
            raise ValidationError(
                f"Cannot move order {self.order_id} from "
                f"{self.status.value} to {new_status.value}"
            )
        return replace(self, status=new_status)

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self.status]
