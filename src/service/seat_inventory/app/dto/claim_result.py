from decimal import Decimal
from typing import List

import attrs

from src.service.seat_inventory.domain.seat_state_entity import SeatState


@attrs.define(frozen=True)
class ClaimResult:
    """Seats claimed for one booking reference, in request order."""

    showing_id: int
    booking_reference: str
    seats: List[SeatState] = attrs.field(factory=list)

    @property
    def seat_ids(self) -> List[int]:
        return [state.seat_id for state in self.seats]

    @property
    def seat_prices(self) -> List[Decimal]:
        return [state.price for state in self.seats]
