from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import BookingStateError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.value_object.booked_seat import BookedSeat
from src.service.booking.domain.value_object.price_snapshot import PriceSnapshot
from src.service.shared_kernel.domain.enum.booking_status import BookingStatus, PaymentStatus
from src.service.shared_kernel.domain.value_object.customer import Customer


@attrs.define(frozen=True)
class Booking:
    id: UUID
    reference: str
    showing_id: int
    customer: Customer
    seats: Tuple[BookedSeat, ...] = attrs.field(converter=tuple)
    price: PriceSnapshot
    status: BookingStatus = BookingStatus.CONFIRMED
    payment_status: PaymentStatus = PaymentStatus.PENDING
    booked_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: UUID,
        reference: str,
        showing_id: int,
        customer: Customer,
        seats: Sequence[BookedSeat],
        price: PriceSnapshot,
    ) -> 'Booking':
        if not seats:
            raise ValidationError('A booking needs at least one seat')

        now = datetime.now(timezone.utc)
        return cls(
            id=id,
            reference=reference,
            showing_id=showing_id,
            customer=customer,
            seats=seats,
            price=price,
            status=BookingStatus.CONFIRMED,
            payment_status=PaymentStatus.PENDING,
            booked_at=now,
            updated_at=now,
        )

    @property
    def seat_ids(self) -> List[int]:
        return [seat.seat_id for seat in self.seats]

    @Logger.io
    def cancel(self) -> 'Booking':
        """
        Cancel booking (Domain validation)

        Raises:
            BookingStateError: Booking is already cancelled or completed
        """
        if self.status == BookingStatus.CANCELLED:
            raise BookingStateError(f'Booking {self.reference} is already cancelled')
        elif self.status == BookingStatus.COMPLETED:
            raise BookingStateError(f'Cannot cancel completed booking {self.reference}')

        now = datetime.now(timezone.utc)
        return attrs.evolve(
            self,
            status=BookingStatus.CANCELLED,
            payment_status=PaymentStatus.REFUNDED,
            cancelled_at=now,
            updated_at=now,
        )

    @Logger.io
    def mark_as_completed(self) -> 'Booking':
        """Close the booking once its showing has run."""
        if self.status.is_terminal:
            raise BookingStateError(f'Booking {self.reference} is already {self.status}')

        now = datetime.now(timezone.utc)
        return attrs.evolve(self, status=BookingStatus.COMPLETED, updated_at=now)
