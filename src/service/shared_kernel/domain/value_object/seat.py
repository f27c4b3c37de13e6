"""
Seat Value Object - Shared Kernel

A fixed physical seat on a screen. Immutable once created; per-showing
booking state lives in the seat inventory, not here.
"""

from decimal import Decimal

import attrs

from src.service.shared_kernel.domain.enum.seat_category import SeatCategory
from src.service.shared_kernel.domain.value_object.money import to_amount


@attrs.define(frozen=True)
class Seat:
    id: int
    screen_name: str
    row: str
    number: int
    category: SeatCategory
    base_price: Decimal = attrs.field(converter=to_amount)

    @property
    def label(self) -> str:
        """Seat identifier shown to customers, e.g. "A-1" """
        return f'{self.row}-{self.number}'
