"""Application service: Update Order Status use case.

Entry point for the fulfillment side (confirm, ship, deliver, cancel).
The Order record itself decides which transitions are legal.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

log = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, status: str) -> None:
        try:
            new_status = OrderStatus(status.lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown order status: '{status}'") from exc

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        updated = order.transition_to(new_status)
        self._order_repo.save(updated)

        log.info(
            "order.status_changed",
            order_id=order_id,
            previous=order.status.value,
            status=new_status.value,
        )
