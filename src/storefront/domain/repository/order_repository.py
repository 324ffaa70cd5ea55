"""Abstract repository for placed orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import OrderRecord


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> OrderRecord | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[OrderRecord]:
        """Return a user's orders, newest first."""

    @abstractmethod
    def save(self, order: OrderRecord) -> None:
        """Persist a new or updated order."""
