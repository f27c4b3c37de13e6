from typing import List

import attrs

from src.service.seat_inventory.domain.seat_state_entity import SeatState
from src.service.shared_kernel.domain.enum.showing_status import ShowingStatus


@attrs.define(frozen=True)
class SeatAvailability:
    showing_id: int
    showing_status: ShowingStatus
    total_seats: int
    available_seats: int
    seats: List[SeatState] = attrs.field(factory=list)
