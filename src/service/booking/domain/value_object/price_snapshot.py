"""
Price Snapshot Value Object

The price of a booking as computed at booking time. Stored with the
booking and read back as-is; later offer changes never reprice it.
"""

from decimal import Decimal
from typing import Tuple

import attrs

from src.service.pricing.domain.pricing_result import PricingResult


@attrs.define(frozen=True)
class OfferLine:
    name: str
    discount_amount: Decimal


@attrs.define(frozen=True)
class PriceSnapshot:
    base_amount: Decimal
    discount_amount: Decimal
    final_amount: Decimal
    discount_description: str = ''
    offers: Tuple[OfferLine, ...] = ()

    @classmethod
    def from_pricing(cls, result: PricingResult) -> 'PriceSnapshot':
        return cls(
            base_amount=result.base_amount,
            discount_amount=result.discount_amount,
            final_amount=result.final_amount,
            discount_description=result.discount_description,
            offers=tuple(
                OfferLine(name=offer.name, discount_amount=offer.discount_amount)
                for offer in result.applied_offers
            ),
        )
