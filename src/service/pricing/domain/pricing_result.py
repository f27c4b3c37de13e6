from decimal import Decimal
from enum import StrEnum
from typing import Tuple

import attrs

from src.service.shared_kernel.domain.value_object.money import ZERO


class OfferCode(StrEnum):
    DISCOUNT_WINDOW = 'discount_window'
    BULK = 'bulk'


@attrs.define(frozen=True)
class AppliedOffer:
    code: OfferCode
    name: str
    label: str
    discount_amount: Decimal


@attrs.define(frozen=True)
class PricingResult:
    base_amount: Decimal
    discount_amount: Decimal
    final_amount: Decimal
    discount_description: str = ''
    applied_offers: Tuple[AppliedOffer, ...] = ()

    @classmethod
    def empty(cls) -> 'PricingResult':
        return cls(base_amount=ZERO, discount_amount=ZERO, final_amount=ZERO)

    @property
    def has_discount(self) -> bool:
        return bool(self.applied_offers)
