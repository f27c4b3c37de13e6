"""
Seat State Entity

Booking state of one physical seat for one showing. Instances are
immutable; every transition returns a new state with a bumped version.
Invariant: status is BOOKED exactly when booking_reference is set.
"""

from decimal import Decimal
from typing import Optional

import attrs

from src.platform.exception.exceptions import SeatNotAvailableError
from src.service.shared_kernel.domain.enum.seat_status import SeatStatus
from src.service.shared_kernel.domain.value_object.money import to_amount
from src.service.shared_kernel.domain.value_object.seat import Seat


def _validate_reference_matches_status(
    instance: 'SeatState', attribute: attrs.Attribute, value: Optional[str]
) -> None:
    if (instance.status == SeatStatus.BOOKED) != (value is not None):
        raise ValueError(
            f'Seat {instance.seat.label} is {instance.status} with booking_reference={value!r}'
        )


@attrs.define(frozen=True)
class SeatState:
    showing_id: int
    seat: Seat
    price: Decimal = attrs.field(converter=to_amount)
    status: SeatStatus = SeatStatus.AVAILABLE
    booking_reference: Optional[str] = attrs.field(
        default=None, validator=_validate_reference_matches_status
    )
    version: int = 0

    @classmethod
    def available(cls, *, showing_id: int, seat: Seat) -> 'SeatState':
        return cls(showing_id=showing_id, seat=seat, price=seat.base_price)

    @property
    def seat_id(self) -> int:
        return self.seat.id

    @property
    def is_available(self) -> bool:
        return self.status == SeatStatus.AVAILABLE

    def claim(self, *, booking_reference: str) -> 'SeatState':
        if not self.is_available:
            raise SeatNotAvailableError(
                f'Seat {self.seat.label} is not available', unavailable_seat_ids=[self.seat_id]
            )
        return attrs.evolve(
            self,
            status=SeatStatus.BOOKED,
            booking_reference=booking_reference,
            version=self.version + 1,
        )

    def release(self) -> 'SeatState':
        return attrs.evolve(
            self,
            status=SeatStatus.AVAILABLE,
            booking_reference=None,
            version=self.version + 1,
        )

    def is_booked_by(self, booking_reference: str | None) -> bool:
        """True when BOOKED, and owned by booking_reference if one is given."""
        if self.status != SeatStatus.BOOKED:
            return False
        return booking_reference is None or self.booking_reference == booking_reference
