"""Application services: change or empty an existing cart.

None of these fail for a product that is not in the cart; the cart is
simply left as it was.
"""

from __future__ import annotations

import structlog

from storefront.application.cart_session import load_cart, store_cart
from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.pricing import PricingEngine

log = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository, pricing: PricingEngine) -> None:
        self._cart_repo = cart_repo
        self._pricing = pricing

    def handle(self, session_id: str, product_id: str) -> CartDTO:
        cart = load_cart(self._cart_repo, session_id)
        cart.remove_item(product_id)
        store_cart(self._cart_repo, session_id, cart)
        log.info("cart.item_removed", session_id=session_id, product_id=product_id)
        return cart_to_dto(session_id, cart, self._pricing)


class SetCartQuantityHandler:

    def __init__(self, cart_repo: CartRepository, pricing: PricingEngine) -> None:
        self._cart_repo = cart_repo
        self._pricing = pricing

    def handle(self, session_id: str, product_id: str, quantity: int) -> CartDTO:
        """Overwrite a line's quantity; zero or less removes the line."""
        cart = load_cart(self._cart_repo, session_id)
        cart.set_quantity(product_id, quantity)
        store_cart(self._cart_repo, session_id, cart)
        log.info(
            "cart.quantity_set",
            session_id=session_id,
            product_id=product_id,
            quantity=quantity,
        )
        return cart_to_dto(session_id, cart, self._pricing)


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str) -> None:
        self._cart_repo.delete(session_id)
        log.info("cart.cleared", session_id=session_id)
