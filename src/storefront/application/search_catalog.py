"""Application service: Search Catalog use case (query)."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class SearchCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, term: str) -> list[Product]:
        """Find products whose title or description contains ``term``."""
        if not term or not term.strip():
            raise ValidationError("Search term is required")
        return self._product_repo.search(term)
