"""Integration tests for the cart use cases.

Uses in-memory fake repositories; no file I/O.
"""

from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart import (
    ClearCartHandler,
    RemoveFromCartHandler,
    SetCartQuantityHandler,
)
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.pricing import PricingEngine
from tests.fakes import FakeCartRepository, FakeProductRepository

PRICING = PricingEngine(Decimal("0.085"))


@pytest.fixture
def carts() -> FakeCartRepository:
    return FakeCartRepository()


@pytest.fixture
def add(carts) -> AddToCartHandler:
    products = FakeProductRepository([
        Product(id="1", title="Widget", price=Money.of("10.50")),
        Product(id="2", title="Gadget", price=Money.of("25.00")),
        Product(id="eu", title="Euro Mug", price=Money.of("8.00", "EUR")),
    ])
    return AddToCartHandler(carts, products, PRICING)


class TestAddToCart:

    def test_returns_priced_cart(self, add):
        add.handle("s1", "1", 3)
        dto = add.handle("s1", "2", 2)
        assert dto.item_count == 5
        assert dto.subtotal == "$81.50"
        assert dto.tax == "$6.93"
        assert dto.total == "$88.43"

    def test_persists_between_calls(self, add, carts):
        add.handle("s1", "1")
        add.handle("s1", "1")
        assert carts.load("s1")[0].quantity == 2

    def test_sessions_are_isolated(self, add, carts):
        add.handle("s1", "1")
        add.handle("s2", "2")
        assert [i.product_id for i in carts.load("s1")] == ["1"]
        assert [i.product_id for i in carts.load("s2")] == ["2"]

    def test_unknown_product_rejected(self, add):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            add.handle("s1", "999")

    def test_negative_quantity_leaves_cart_unchanged(self, add):
        add.handle("s1", "1", 2)
        dto = add.handle("s1", "1", -1)
        assert dto.item_count == 2

    def test_ignored_quantity_is_not_stored_or_reported_as_added(self, add, carts):
        with capture_logs() as logs:
            dto = add.handle("s1", "1", 0)
        assert dto.item_count == 0
        assert carts.load("s1") is None
        events = [entry["event"] for entry in logs]
        assert "cart.add_ignored" in events
        assert "cart.item_added" not in events

    def test_successful_add_is_logged(self, add):
        with capture_logs() as logs:
            add.handle("s1", "1", 2)
        added = [entry for entry in logs if entry["event"] == "cart.item_added"]
        assert added[0]["item_count"] == 2

    def test_currency_mismatch_rejected_before_cart_changes(self, add, carts):
        add.handle("s1", "1")
        with capture_logs() as logs:
            with pytest.raises(ValidationError, match="priced in EUR"):
                add.handle("s1", "eu")
        assert [i.product_id for i in carts.load("s1")] == ["1"]
        assert not any(entry["event"] == "cart.item_added" for entry in logs)

    def test_currency_mismatch_on_empty_session_stores_nothing(self, add, carts):
        with pytest.raises(ValidationError):
            add.handle("s2", "eu")
        assert carts.load("s2") is None


class TestUpdateCart:

    def test_set_quantity(self, add, carts):
        add.handle("s1", "1")
        dto = SetCartQuantityHandler(carts, PRICING).handle("s1", "1", 4)
        assert dto.items[0].quantity == 4
        assert dto.items[0].line_total == "$42.00"

    def test_set_quantity_zero_removes_and_forgets_session(self, add, carts):
        add.handle("s1", "1")
        dto = SetCartQuantityHandler(carts, PRICING).handle("s1", "1", 0)
        assert dto.items == []
        assert carts.load("s1") is None

    def test_remove(self, add, carts):
        add.handle("s1", "1")
        add.handle("s1", "2")
        dto = RemoveFromCartHandler(carts, PRICING).handle("s1", "1")
        assert [i.product_id for i in dto.items] == ["2"]

    def test_remove_absent_product_is_noop(self, add, carts):
        add.handle("s1", "1")
        dto = RemoveFromCartHandler(carts, PRICING).handle("s1", "missing")
        assert dto.item_count == 1

    def test_clear(self, add, carts):
        add.handle("s1", "1")
        ClearCartHandler(carts).handle("s1")
        assert carts.load("s1") is None


class TestShowCart:

    def test_empty_session(self, carts):
        dto = ShowCartHandler(carts, PRICING).handle("nobody")
        assert dto.items == []
        assert dto.item_count == 0
        assert dto.total == "$0.00"
