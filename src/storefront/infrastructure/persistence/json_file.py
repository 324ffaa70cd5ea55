"""Shared helpers for the JSON-file-backed repositories.

Amounts are stored as strings so Decimal precision survives the trip.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any

from storefront.domain.model.cart import LineItem
from storefront.domain.model.value_objects import Money


class JsonFile:
    """A JSON document on disk, created with ``empty`` on first use."""

    def __init__(self, file_path: Path, empty: Any) -> None:
        self._file_path = file_path
        self._empty = empty
        self._ensure_file()

    def load(self) -> Any:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, data: Any) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self.persist(self._empty)


# --- Line item (de)serialization ----------------------------------------------


def line_item_to_raw(item: LineItem) -> dict:
    return {
        "product_id": item.product_id,
        "title": item.title,
        "unit_price": str(item.unit_price.amount),
        "currency": item.unit_price.currency,
        "quantity": item.quantity,
    }


def line_item_from_raw(raw: dict) -> LineItem:
    return LineItem(
        product_id=raw["product_id"],
        title=raw["title"],
        unit_price=Money(Decimal(raw["unit_price"]), raw.get("currency", "USD")),
        quantity=raw["quantity"],
    )
