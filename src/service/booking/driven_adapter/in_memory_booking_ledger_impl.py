import secrets
import threading
from typing import Callable, Dict, Set

from src.platform.exception.exceptions import (
    BookingStateError,
    InternalError,
    ResourceNotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_ledger import IBookingLedger
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.value_object.booking_reference import (
    generate_booking_reference,
)
from src.service.shared_kernel.domain.enum.booking_status import BookingStatus


class InMemoryBookingLedgerImpl(IBookingLedger):
    def __init__(
        self,
        *,
        max_attempts: int = 5,
        token_bytes: Callable[[int], bytes] = secrets.token_bytes,
    ) -> None:
        self.max_attempts = max_attempts
        self._token_bytes = token_bytes
        self._bookings: Dict[str, Booking] = {}
        # Minted but not yet stored or discarded
        self._issued: Set[str] = set()
        self._lock = threading.Lock()

    @Logger.io
    async def mint_reference(self) -> str:
        for _ in range(self.max_attempts):
            reference = generate_booking_reference(token_bytes=self._token_bytes)
            with self._lock:
                if reference not in self._bookings and reference not in self._issued:
                    self._issued.add(reference)
                    return reference
            Logger.base.warning(f'🔁 [LEDGER] Reference collision on {reference}, retrying')

        raise InternalError(
            f'Could not mint a unique booking reference after {self.max_attempts} attempts'
        )

    @Logger.io
    async def store(self, *, booking: Booking) -> Booking:
        with self._lock:
            if booking.reference in self._bookings:
                raise InternalError(f'Duplicate booking reference: {booking.reference}')
            self._bookings[booking.reference] = booking
            self._issued.discard(booking.reference)

        Logger.base.info(
            f'📝 [LEDGER] Stored booking {booking.reference} for showing {booking.showing_id}'
        )
        return booking

    async def find_by_reference(self, *, reference: str) -> Booking | None:
        return self._bookings.get(reference)

    @Logger.io
    async def mark_cancelled(self, *, booking: Booking) -> Booking:
        if booking.status != BookingStatus.CANCELLED:
            raise InternalError(f'Booking {booking.reference} is not cancelled')

        with self._lock:
            stored = self._bookings.get(booking.reference)
            if stored is None:
                raise ResourceNotFoundError(f'Booking not found with reference: {booking.reference}')
            if stored.status.is_terminal:
                raise BookingStateError(f'Booking {booking.reference} is already {stored.status}')
            self._bookings[booking.reference] = booking

        return booking

    @Logger.io
    async def discard_reference(self, *, reference: str) -> None:
        with self._lock:
            self._issued.discard(reference)
            removed = self._bookings.pop(reference, None)

        if removed is not None:
            Logger.base.warning(f'🗑️ [LEDGER] Removed unfinished booking {reference}')
