"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from storefront.domain.model.cart import LineItem
from storefront.domain.model.order import OrderRecord
from storefront.domain.model.product import Product, matches_term
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, OrderRecord] = {}

    def get_by_id(self, order_id: str) -> OrderRecord | None:
        return self._store.get(order_id)

    def list_for_user(self, user_id: str) -> list[OrderRecord]:
        orders = [o for o in self._store.values() if o.user_id == user_id]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def save(self, order: OrderRecord) -> None:
        self._store[order.order_id] = order


class FailingOrderRepository(FakeOrderRepository):
    """Simulates the persistence collaborator being unavailable."""

    def save(self, order: OrderRecord) -> None:
        raise ConnectionError("order store unavailable")


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def list_by_category(self, category: str) -> list[Product]:
        return [
            p for p in self._store.values()
            if p.category.lower() == category.strip().lower()
        ]

    def search(self, term: str) -> list[Product]:
        return [p for p in self._store.values() if matches_term(p, term)]

    def list_categories(self) -> list[str]:
        return sorted({p.category for p in self._store.values() if p.category})

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> bool:
        return self._store.pop(product_id, None) is not None


class FakeCartRepository(CartRepository):

    def __init__(self) -> None:
        self._store: dict[str, list[LineItem]] = {}

    def load(self, session_id: str) -> list[LineItem] | None:
        items = self._store.get(session_id)
        return list(items) if items is not None else None

    def save(self, session_id: str, items: list[LineItem]) -> None:
        self._store[session_id] = list(items)

    def delete(self, session_id: str) -> None:
        self._store.pop(session_id, None)


class RecordingCartRepository(FakeCartRepository):
    """Remembers every call so tests can check what a use case touched."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, str]] = []

    def load(self, session_id: str) -> list[LineItem] | None:
        self.calls.append(("load", session_id))
        return super().load(session_id)

    def save(self, session_id: str, items: list[LineItem]) -> None:
        self.calls.append(("save", session_id))
        super().save(session_id, items)

    def delete(self, session_id: str) -> None:
        self.calls.append(("delete", session_id))
        super().delete(session_id)
