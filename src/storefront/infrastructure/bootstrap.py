"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.domain.service.pricing import PricingEngine
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.settings import StorefrontSettings


def load_settings() -> StorefrontSettings:
    return StorefrontSettings()


def product_repository(settings: StorefrontSettings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def order_repository(settings: StorefrontSettings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def cart_repository(settings: StorefrontSettings) -> JsonCartRepository:
    return JsonCartRepository(settings.data_dir / "carts.json")


def pricing_engine(settings: StorefrontSettings) -> PricingEngine:
    return PricingEngine(tax_rate=settings.tax_rate, currency=settings.currency)
