"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_session import load_cart
from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.pricing import PricingEngine


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository, pricing: PricingEngine) -> None:
        self._cart_repo = cart_repo
        self._pricing = pricing

    def handle(self, session_id: str) -> CartDTO:
        cart = load_cart(self._cart_repo, session_id)
        return cart_to_dto(session_id, cart, self._pricing)
