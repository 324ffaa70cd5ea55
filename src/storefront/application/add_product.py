"""Application service: Add Product use case.

Seeds the local catalog; in a hosted setup the catalog collaborator
owns this.
"""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, currency: str = "USD") -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        product_id: str,
        title: str,
        price: str,
        category: str = "",
        description: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        product_id = product_id.strip()
        if self._product_repo.get_by_id(product_id) is not None:
            raise ValidationError(f"Product '{product_id}' already exists")

        product = Product(
            id=product_id,
            title=title.strip(),
            price=Money.of(price, self._currency),
            category=category.strip(),
            description=description,
        )
        self._product_repo.save(product)
        return product
