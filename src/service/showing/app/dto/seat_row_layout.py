from decimal import Decimal
from typing import Optional

import attrs

from src.service.shared_kernel.domain.enum.seat_category import DEFAULT_CATEGORY_PRICE, SeatCategory


@attrs.define(frozen=True)
class SeatRowLayout:
    """One row of a screen: `seat_count` seats numbered from 1, sharing a category."""

    row: str
    seat_count: int
    category: SeatCategory = SeatCategory.REGULAR
    price: Optional[Decimal] = None

    @property
    def seat_price(self) -> Decimal:
        return self.price if self.price is not None else DEFAULT_CATEGORY_PRICE[self.category]
