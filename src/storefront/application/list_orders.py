"""Application service: Order History use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str) -> list[OrderDTO]:
        """Return the user's orders, newest first."""
        if not user_id or not user_id.strip():
            raise ValidationError("A signed-in user is required to view orders")
        return [order_to_dto(o) for o in self._order_repo.list_for_user(user_id)]
