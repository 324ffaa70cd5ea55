"""Application service: List Categories use case (query)."""

from __future__ import annotations

from storefront.domain.repository.product_repository import ProductRepository


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[str]:
        return self._product_repo.list_categories()
