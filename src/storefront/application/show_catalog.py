"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class ShowCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category: str | None = None) -> list[Product]:
        if category:
            return self._product_repo.list_by_category(category)
        return self._product_repo.list_all()
