"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import OrderRecord, OrderStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import (
    JsonFile,
    line_item_from_raw,
    line_item_to_raw,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> OrderRecord | None:
        for raw in self._file.load():
            if raw["order_id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_for_user(self, user_id: str) -> list[OrderRecord]:
        orders = [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["user_id"] == user_id
        ]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def save(self, order: OrderRecord) -> None:
        orders = self._file.load()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["order_id"] == order.order_id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._file.persist(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: OrderRecord) -> dict:
        return {
            "order_id": order.order_id,
            "user_id": order.user_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "shipping_address": order.shipping_address,
            "currency": order.total.currency,
            "subtotal": str(order.subtotal.amount),
            "tax": str(order.tax.amount),
            "total": str(order.total.amount),
            "items": [line_item_to_raw(item) for item in order.items],
        }

    @staticmethod
    def _to_domain(raw: dict) -> OrderRecord:
        currency = raw.get("currency", "USD")
        return OrderRecord(
            order_id=raw["order_id"],
            user_id=raw["user_id"],
            items=tuple(line_item_from_raw(i) for i in raw["items"]),
            subtotal=Money(Decimal(raw["subtotal"]), currency),
            tax=Money(Decimal(raw["tax"]), currency),
            total=Money(Decimal(raw["total"]), currency),
            shipping_address=raw["shipping_address"],
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
