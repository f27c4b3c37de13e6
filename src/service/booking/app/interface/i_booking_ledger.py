"""
Booking Ledger Interface

Issues booking references and records bookings.
"""

from abc import ABC, abstractmethod

from src.service.booking.domain.entity.booking_entity import Booking


class IBookingLedger(ABC):
    @abstractmethod
    async def mint_reference(self) -> str:
        """
        Issue a reference not used by any stored or in-flight booking

        Raises:
            InternalError: No unique reference after the configured attempts
        """
        pass

    @abstractmethod
    async def store(self, *, booking: Booking) -> Booking:
        """
        Record a new booking

        Raises:
            InternalError: A booking with the same reference already exists
        """
        pass

    @abstractmethod
    async def find_by_reference(self, *, reference: str) -> Booking | None:
        pass

    @abstractmethod
    async def mark_cancelled(self, *, booking: Booking) -> Booking:
        """
        Replace the stored booking with its cancelled version.

        Compare-and-set: only succeeds while the stored booking is not terminal.

        Raises:
            ResourceNotFoundError: No booking with that reference
            BookingStateError: Stored booking is already cancelled or completed
        """
        pass

    @abstractmethod
    async def discard_reference(self, *, reference: str) -> None:
        """
        Forget a reference whose booking did not complete.

        Drops it from the in-flight set and removes a booking stored under it,
        so an abandoned booking leaves nothing behind.
        """
        pass
