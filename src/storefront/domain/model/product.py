"""Product: a catalog entry.

Products are owned by the catalog collaborator.  The storefront only reads
them: title and price are copied into a cart line when a product is added,
so later catalog edits never reach an existing cart or order.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Price correctness is the catalog's business; the only rule checked
    here is that the price is not negative, which ``Money`` already
    guarantees.
    """

    id: str
    title: str
    price: Money
    category: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id or not str(self.id).strip():
            raise ValidationError("Product id is required")
        if not self.title or not self.title.strip():
            raise ValidationError("Product title is required")


def matches_term(product: Product, term: str) -> bool:
    """Case-insensitive substring match on title or description."""
    needle = term.strip().lower()
    return needle in product.title.lower() or needle in product.description.lower()
