from decimal import Decimal

import attrs

from src.service.seat_inventory.domain.seat_state_entity import SeatState
from src.service.shared_kernel.domain.enum.seat_category import SeatCategory


@attrs.define(frozen=True)
class BookedSeat:
    """Seat as it was when booked: id plus the label, category and price charged."""

    seat_id: int
    label: str
    category: SeatCategory
    price: Decimal

    @classmethod
    def from_seat_state(cls, state: SeatState) -> 'BookedSeat':
        return cls(
            seat_id=state.seat_id,
            label=state.seat.label,
            category=state.seat.category,
            price=state.price,
        )
