"""Domain service: Pricing.

Pure functions over a cart snapshot.  Nothing here rounds except
``total`` (and ``PricingEngine.quote`` when it prepares display
figures), so the same items always produce the same cents.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import LineItem
from storefront.domain.model.value_objects import Money


def subtotal(items: Iterable[LineItem], currency: str = "USD") -> Money:
    """Sum of unit price x quantity over all lines, unrounded."""
    result = Money.zero(currency)
    for item in items:
        result = result + item.line_total
    return result


def tax(amount: Money, rate: Decimal) -> Money:
    """Tax owed on ``amount`` at ``rate``, unrounded."""
    _check_rate(rate)
    return amount.scaled(rate)


def total(amount: Money, tax_amount: Money) -> Money:
    """Grand total rounded half-up to cents."""
    return (amount + tax_amount).rounded()


def _check_rate(rate: Decimal) -> None:
    if not isinstance(rate, Decimal):
        raise ValidationError(f"Tax rate must be a Decimal, got {type(rate).__name__}")
    if not Decimal("0") <= rate <= Decimal("1"):
        raise ValidationError(f"Tax rate must be between 0 and 1, got {rate}")


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Money
    tax: Money
    total: Money


class PricingEngine:
    """Binds a configured tax rate to the pricing functions."""

    def __init__(self, tax_rate: Decimal, currency: str = "USD") -> None:
        _check_rate(tax_rate)
        self.tax_rate = tax_rate
        self.currency = currency

    def quote(self, items: Iterable[LineItem]) -> PriceBreakdown:
        """Price a snapshot.

        ``subtotal`` and ``tax`` are rounded to cents for display; ``total``
        is computed from the unrounded figures.
        """
        sub = subtotal(items, self.currency)
        tax_amount = tax(sub, self.tax_rate)
        return PriceBreakdown(
            subtotal=sub.rounded(),
            tax=tax_amount.rounded(),
            total=total(sub, tax_amount),
        )
