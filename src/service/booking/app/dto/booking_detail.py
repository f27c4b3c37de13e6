from datetime import datetime
from typing import List, Optional

import attrs

from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.value_object.booked_seat import BookedSeat
from src.service.booking.domain.value_object.price_snapshot import PriceSnapshot
from src.service.shared_kernel.domain.enum.booking_status import BookingStatus, PaymentStatus
from src.service.shared_kernel.domain.value_object.customer import Customer
from src.service.showing.domain.showing_entity import Showing


@attrs.define(frozen=True)
class ShowingSummary:
    showing_id: int
    movie_title: str
    theatre_name: str
    screen_name: str
    start_at: datetime

    @classmethod
    def from_showing(cls, showing: Showing) -> 'ShowingSummary':
        return cls(
            showing_id=showing.id or 0,
            movie_title=showing.movie_title,
            theatre_name=showing.theatre_name,
            screen_name=showing.screen_name,
            start_at=showing.start_at,
        )


@attrs.define(frozen=True)
class BookingDetail:
    """Booking as returned to callers: the stored record plus showing details."""

    reference: str
    status: BookingStatus
    payment_status: PaymentStatus
    customer: Customer
    showing: ShowingSummary
    seats: List[BookedSeat]
    price: PriceSnapshot
    booked_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    @classmethod
    def from_booking(cls, *, booking: Booking, showing: Showing) -> 'BookingDetail':
        return cls(
            reference=booking.reference,
            status=booking.status,
            payment_status=booking.payment_status,
            customer=booking.customer,
            showing=ShowingSummary.from_showing(showing),
            seats=list(booking.seats),
            price=booking.price,
            booked_at=booking.booked_at,
            cancelled_at=booking.cancelled_at,
        )
