"""
Pricing Engine

Turns the prices of a set of claimed seats into a priced result:
base amount, applied offers, total discount and final amount.
Stateless and side-effect free, safe to share across requests.
"""

from decimal import Decimal
from typing import Sequence

from src.platform.logging.loguru_io import Logger
from src.service.pricing.domain.offer_rules import (
    DEFAULT_OFFER_RULES,
    OfferRule,
    PricingPolicy,
    PricingState,
)
from src.service.pricing.domain.pricing_result import PricingResult
from src.service.shared_kernel.domain.value_object.money import round_amount, to_amount


DESCRIPTION_SEPARATOR = ' + '


class PricingEngine:
    def __init__(
        self,
        *,
        policy: PricingPolicy | None = None,
        rules: Sequence[OfferRule] = DEFAULT_OFFER_RULES,
    ) -> None:
        self.policy = policy or PricingPolicy()
        self.rules = tuple(rules)

    @Logger.io
    def price(
        self, *, seat_prices: Sequence[Decimal | int | float], is_discount_window: bool
    ) -> PricingResult:
        """
        Price a seat set.

        Args:
            seat_prices: Original price of every seat in the order
            is_discount_window: Whether the showing starts inside the discount window

        Returns:
            PricingResult; all zeros with no offers for an empty order
        """
        prices = tuple(to_amount(price) for price in seat_prices)
        if not prices:
            return PricingResult.empty()

        state = PricingState(seat_prices=prices, is_discount_window=is_discount_window)
        for rule in self.rules:
            offer = rule(state, self.policy)
            if offer is not None:
                state = state.with_offer(offer)

        base_amount = state.base_amount
        # Offers are already rounded individually
        discount_amount = round_amount(
            sum((offer.discount_amount for offer in state.applied_offers), Decimal('0'))
        )
        return PricingResult(
            base_amount=round_amount(base_amount),
            discount_amount=discount_amount,
            final_amount=round_amount(base_amount - discount_amount),
            discount_description=DESCRIPTION_SEPARATOR.join(
                offer.label for offer in state.applied_offers
            ),
            applied_offers=state.applied_offers,
        )
