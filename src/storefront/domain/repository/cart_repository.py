"""Abstract repository for carts kept between requests."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import LineItem


class CartRepository(ABC):

    @abstractmethod
    def load(self, session_id: str) -> list[LineItem] | None:
        """Return the stored snapshot for a session, or None if there is none."""

    @abstractmethod
    def save(self, session_id: str, items: list[LineItem]) -> None:
        """Store a snapshot for a session, replacing any previous one."""

    @abstractmethod
    def delete(self, session_id: str) -> None:
        """Forget a session's cart; unknown sessions are ignored."""
