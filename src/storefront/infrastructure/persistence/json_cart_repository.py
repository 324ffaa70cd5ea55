"""JSON-file-backed implementation of CartRepository.

All sessions share one file: ``{session_id: [line, ...]}``.
"""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.cart import LineItem
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_file import (
    JsonFile,
    line_item_from_raw,
    line_item_to_raw,
)


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty={})

    def load(self, session_id: str) -> list[LineItem] | None:
        raw = self._file.load().get(session_id)
        if raw is None:
            return None
        return [line_item_from_raw(item) for item in raw]

    def save(self, session_id: str, items: list[LineItem]) -> None:
        carts = self._file.load()
        carts[session_id] = [line_item_to_raw(item) for item in items]
        self._file.persist(carts)

    def delete(self, session_id: str) -> None:
        carts = self._file.load()
        if carts.pop(session_id, None) is not None:
            self._file.persist(carts)
