"""Application service: Place Order (checkout) use case.

Steps:
1. Restore the session's cart.
2. Assemble a pending OrderRecord (validates user, items and address).
3. Hand the record to the order repository.
4. Only once the repository accepted it, empty the session's cart.

A failure in step 3 propagates to the caller as-is and the cart is
left untouched.
"""

from __future__ import annotations

import structlog

from storefront.application.cart_session import load_cart
from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_assembler import create_order
from storefront.domain.service.pricing import PricingEngine

log = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        order_repo: OrderRepository,
        pricing: PricingEngine,
    ) -> None:
        self._cart_repo = cart_repo
        self._order_repo = order_repo
        self._pricing = pricing

    def handle(self, session_id: str, user_id: str, shipping_address: str) -> OrderDTO:
        cart = load_cart(self._cart_repo, session_id)

        order = create_order(
            user_id=user_id,
            items=cart.snapshot(),
            shipping_address=shipping_address,
            pricing=self._pricing,
        )
        self._order_repo.save(order)

        self._cart_repo.delete(session_id)

        log.info(
            "order.placed",
            order_id=order.order_id,
            user_id=user_id,
            item_count=order.item_count,
            total=str(order.total.amount),
        )
        return order_to_dto(order)
