"""Domain service: Order assembly.

Turns a cart snapshot plus checkout details into a new ``OrderRecord``.
Validation happens here, before anything is handed to the persistence
collaborator; storing the record is the caller's job.
"""

from __future__ import annotations

import secrets
import string
from datetime import datetime, timezone
from typing import Callable, Iterable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import LineItem
from storefront.domain.model.order import OrderRecord, OrderStatus
from storefront.domain.service.pricing import PricingEngine

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_RANDOM_LENGTH = 9


def new_order_id(now: datetime | None = None) -> str:
    """Return ``order_<epoch millis>_<9 random base-36 chars>``.

    The random suffix gives 36**9 (about 10**14) values per millisecond.
    """
    now = now or datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_RANDOM_LENGTH))
    return f"order_{millis}_{suffix}"


def create_order(
    user_id: str | None,
    items: Iterable[LineItem],
    shipping_address: str | None,
    pricing: PricingEngine,
    *,
    now: datetime | None = None,
    id_factory: Callable[[datetime], str] = new_order_id,
) -> OrderRecord:
    """Assemble a pending order from a cart snapshot.

    Raises ValidationError if the user is missing, the snapshot is empty
    or the shipping address is blank.
    """
    if not user_id or not user_id.strip():
        raise ValidationError("A signed-in user is required to place an order")

    snapshot = tuple(items)
    if not snapshot:
        raise ValidationError("Cannot place an order with an empty cart")

    if not shipping_address or not shipping_address.strip():
        raise ValidationError("Shipping address is required")

    created_at = now or datetime.now(timezone.utc)
    breakdown = pricing.quote(snapshot)

    return OrderRecord(
        order_id=id_factory(created_at),
        user_id=user_id,
        items=snapshot,
        subtotal=breakdown.subtotal,
        tax=breakdown.tax,
        total=breakdown.total,
        shipping_address=shipping_address.strip(),
        status=OrderStatus.PENDING,
        created_at=created_at,
    )
