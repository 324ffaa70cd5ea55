"""Application service: Update Product use case."""

from __future__ import annotations

from dataclasses import replace

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

log = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        *,
        title: str | None = None,
        price: str | None = None,
        category: str | None = None,
        description: str | None = None,
    ) -> Product:
        """Change a product's catalog details.

        Carts and orders keep the title and price they captured when the
        product was added, so this never reaches them.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: {product_id}")

        changes: dict[str, object] = {}
        if title is not None:
            changes["title"] = title.strip()
        if price is not None:
            changes["price"] = Money.of(price, product.price.currency)
        if category is not None:
            changes["category"] = category.strip()
        if description is not None:
            changes["description"] = description
        if not changes:
            raise ValidationError("Nothing to update")

        updated = replace(product, **changes)
        self._product_repo.save(updated)
        log.info("product.updated", product_id=product_id, fields=sorted(changes))
        return updated
