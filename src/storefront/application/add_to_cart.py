"""Application service: Add to Cart use case."""

from __future__ import annotations

import structlog

from storefront.application.cart_session import load_cart, store_cart
from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.pricing import PricingEngine

log = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        pricing: PricingEngine,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._pricing = pricing

    def handle(self, session_id: str, product_id: str, quantity: int = 1) -> CartDTO:
        """Add a catalog product to the session's cart.

        Title and price are copied from the catalog at this moment.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        if product.price.currency != self._pricing.currency:
            raise ValidationError(
                f"Product '{product_id}' is priced in {product.price.currency}, "
                f"the store sells in {self._pricing.currency}"
            )

        cart = load_cart(self._cart_repo, session_id)
        before = cart.item_count
        cart.add_item(product, quantity)  # logs cart.add_ignored for quantity <= 0
        dto = cart_to_dto(session_id, cart, self._pricing)
        if cart.item_count == before:
            return dto

        store_cart(self._cart_repo, session_id, cart)
        log.info(
            "cart.item_added",
            session_id=session_id,
            product_id=product_id,
            quantity=quantity,
            item_count=cart.item_count,
        )
        return dto
