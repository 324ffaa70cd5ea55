"""Integration tests for the PlaceOrder (checkout) use case."""

from decimal import Decimal

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.pricing import PricingEngine
from tests.fakes import (
    FailingOrderRepository,
    FakeCartRepository,
    FakeOrderRepository,
    FakeProductRepository,
    RecordingCartRepository,
)

PRICING = PricingEngine(Decimal("0.085"))


def _cart_with_items() -> FakeCartRepository:
    carts = FakeCartRepository()
    products = FakeProductRepository([
        Product(id="sku1", title="Boots", price=Money.of("99.99")),
        Product(id="sku2", title="Socks", price=Money.of("24.99")),
    ])
    add = AddToCartHandler(carts, products, PRICING)
    add.handle("s1", "sku1", 1)
    add.handle("s1", "sku2", 2)
    return carts


class TestPlaceOrderHappyPath:

    def test_returns_pending_order(self):
        handler = PlaceOrderHandler(_cart_with_items(), FakeOrderRepository(), PRICING)
        dto = handler.handle("s1", "user123", "1 Oak Ave")
        assert dto.status == "pending"
        assert dto.subtotal == "$149.97"
        assert dto.total == "$162.72"
        assert dto.order_id.startswith("order_")

    def test_persists_order(self):
        orders = FakeOrderRepository()
        dto = PlaceOrderHandler(_cart_with_items(), orders, PRICING).handle(
            "s1", "user123", "1 Oak Ave"
        )
        saved = orders.get_by_id(dto.order_id)
        assert saved is not None
        assert saved.status == OrderStatus.PENDING
        assert [i.product_id for i in saved.items] == ["sku1", "sku2"]

    def test_clears_cart_after_success(self):
        carts = _cart_with_items()
        PlaceOrderHandler(carts, FakeOrderRepository(), PRICING).handle(
            "s1", "user123", "1 Oak Ave"
        )
        assert carts.load("s1") is None

    def test_checkout_deletes_the_stored_cart_once(self):
        carts = RecordingCartRepository()
        carts.save("s1", _cart_with_items().load("s1"))
        carts.calls.clear()
        PlaceOrderHandler(carts, FakeOrderRepository(), PRICING).handle(
            "s1", "user123", "1 Oak Ave"
        )
        assert carts.calls == [("load", "s1"), ("delete", "s1")]


class TestPlaceOrderValidation:

    def test_empty_cart_rejected(self):
        handler = PlaceOrderHandler(FakeCartRepository(), FakeOrderRepository(), PRICING)
        with pytest.raises(ValidationError, match="empty cart"):
            handler.handle("s1", "user123", "123 Main St")

    def test_blank_address_rejected_and_cart_kept(self):
        carts = _cart_with_items()
        orders = FakeOrderRepository()
        with pytest.raises(ValidationError, match="Shipping address"):
            PlaceOrderHandler(carts, orders, PRICING).handle("s1", "user123", "")
        assert len(carts.load("s1")) == 2
        assert orders.list_for_user("user123") == []


class TestPlaceOrderPersistenceFailure:

    def test_failure_is_surfaced_and_cart_kept(self):
        carts = _cart_with_items()
        handler = PlaceOrderHandler(carts, FailingOrderRepository(), PRICING)
        with pytest.raises(ConnectionError, match="unavailable"):
            handler.handle("s1", "user123", "1 Oak Ave")
        assert len(carts.load("s1")) == 2

