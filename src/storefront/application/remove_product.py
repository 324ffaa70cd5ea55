"""Application service: Remove Product use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository

log = structlog.get_logger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        """Take a product out of the catalog.

        Existing cart lines and orders hold their own snapshot of it.
        """
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product not found: {product_id}")
        log.info("product.removed", product_id=product_id)
