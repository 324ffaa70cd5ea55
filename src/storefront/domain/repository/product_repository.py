"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, remote catalog,
in-memory) live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_by_category(self, category: str) -> list[Product]:
        """Return products whose category matches, ignoring case."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def search(self, term: str) -> list[Product]:
        """Return products whose title or description contains ``term``, ignoring case."""

    @abstractmethod
    def list_categories(self) -> list[str]:
        """Return the distinct non-empty categories, sorted."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product; return False if it was not in the catalog."""
