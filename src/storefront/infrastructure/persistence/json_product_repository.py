"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product, matches_term
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def list_by_category(self, category: str) -> list[Product]:
        wanted = category.strip().lower()
        return [p for p in self._load().values() if p.category.lower() == wanted]

    def search(self, term: str) -> list[Product]:
        return [p for p in self._load().values() if matches_term(p, term)]

    def list_categories(self) -> list[str]:
        return sorted({p.category for p in self._load().values() if p.category})

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    def delete(self, product_id: str) -> bool:
        products = self._load()
        if products.pop(product_id, None) is None:
            return False
        self._persist(products)
        return True

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                title=item["title"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                category=item.get("category", ""),
                description=item.get("description", ""),
            )
            for item in self._file.load()
        }

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist(
            [
                {
                    "id": p.id,
                    "title": p.title,
                    "price": str(p.price.amount),
                    "currency": p.price.currency,
                    "category": p.category,
                    "description": p.description,
                }
                for p in products.values()
            ]
        )
