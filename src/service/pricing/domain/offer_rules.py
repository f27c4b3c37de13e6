"""
Offer Rules

Each rule is a pure function over the running PricingState and returns the
offer it grants, or None. Rules run in list order; a later rule can see
which offers were already applied. Adding an offer means appending a rule
to DEFAULT_OFFER_RULES.
"""

from decimal import Decimal
from typing import Callable, Optional, Tuple

import attrs

from src.service.pricing.domain.pricing_result import AppliedOffer, OfferCode
from src.service.shared_kernel.domain.value_object.money import round_amount


_HUNDRED = Decimal('100')


@attrs.define(frozen=True)
class PricingPolicy:
    discount_window_percent: int = 20
    bulk_min_seats: int = 3
    bulk_percent: int = 50

    @property
    def discount_window_rate(self) -> Decimal:
        return Decimal(self.discount_window_percent) / _HUNDRED

    @property
    def bulk_rate(self) -> Decimal:
        return Decimal(self.bulk_percent) / _HUNDRED


@attrs.define(frozen=True)
class PricingState:
    seat_prices: Tuple[Decimal, ...]
    is_discount_window: bool
    applied_offers: Tuple[AppliedOffer, ...] = ()

    @property
    def base_amount(self) -> Decimal:
        return sum(self.seat_prices, Decimal('0'))

    def has_applied(self, code: OfferCode) -> bool:
        return any(offer.code == code for offer in self.applied_offers)

    def with_offer(self, offer: AppliedOffer) -> 'PricingState':
        return attrs.evolve(self, applied_offers=(*self.applied_offers, offer))


OfferRule = Callable[[PricingState, PricingPolicy], Optional[AppliedOffer]]


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')
    return f'{n}{suffix}'


def discount_window_offer(state: PricingState, policy: PricingPolicy) -> Optional[AppliedOffer]:
    """Percentage off the whole order for showings starting inside the discount window."""
    if not state.is_discount_window:
        return None

    percent = policy.discount_window_percent
    return AppliedOffer(
        code=OfferCode.DISCOUNT_WINDOW,
        name=f'Afternoon Show Discount ({percent}% off)',
        label=f'{percent}% Afternoon Discount',
        discount_amount=round_amount(state.base_amount * policy.discount_window_rate),
    )


def bulk_offer(state: PricingState, policy: PricingPolicy) -> Optional[AppliedOffer]:
    """
    Percentage off one seat once the order reaches bulk_min_seats.

    The discounted seat is the cheapest one. When the window offer already
    applied, the bulk discount is taken from that seat's window-discounted price.
    """
    if len(state.seat_prices) < policy.bulk_min_seats:
        return None

    seat_price = min(state.seat_prices)
    if state.has_applied(OfferCode.DISCOUNT_WINDOW):
        seat_price = seat_price * (1 - policy.discount_window_rate)

    nth = _ordinal(policy.bulk_min_seats)
    return AppliedOffer(
        code=OfferCode.BULK,
        name=f'{policy.bulk_percent}% off on {nth} Ticket',
        label=f'{policy.bulk_percent}% off {nth} ticket',
        discount_amount=round_amount(seat_price * policy.bulk_rate),
    )


DEFAULT_OFFER_RULES: Tuple[OfferRule, ...] = (discount_window_offer, bulk_offer)
