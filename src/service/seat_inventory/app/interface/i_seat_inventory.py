"""
Seat Inventory Interface

Per-showing seat state with all-or-nothing claim and release.
Writers go through a hold, which owns the locks of every seat it touches;
readers take a lock-free snapshot.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional, Sequence

from src.service.seat_inventory.app.dto.claim_result import ClaimResult
from src.service.seat_inventory.domain.seat_state_entity import SeatState
from src.service.shared_kernel.domain.value_object.seat import Seat


class ISeatHold(ABC):
    """
    Locked view over a set of seats of one showing.

    Changes are staged and only become visible on commit(). Leaving the
    hold without committing discards them.
    """

    @abstractmethod
    async def claim(self, *, booking_reference: str) -> ClaimResult:
        """
        Stage AVAILABLE -> BOOKED for every held seat.

        Raises:
            SeatNotAvailableError: Any held seat is booked or unknown to the showing
        """
        pass

    @abstractmethod
    async def release(self, *, booking_reference: Optional[str] = None) -> List[SeatState]:
        """
        Stage BOOKED -> AVAILABLE for the held seats.

        Seats already AVAILABLE are skipped. With booking_reference, seats
        booked under another reference are left untouched.

        Returns:
            The released states
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass


class ISeatInventory(ABC):
    @abstractmethod
    async def initialize_showing(self, *, showing_id: int, seats: Sequence[Seat]) -> List[SeatState]:
        """
        Create AVAILABLE states for every seat of a newly registered showing.

        Raises:
            ValidationError: The showing is already initialized or seat ids repeat
        """
        pass

    @abstractmethod
    def hold(
        self, *, showing_id: int, seat_ids: Sequence[int]
    ) -> AbstractAsyncContextManager[ISeatHold]:
        """
        Lock the given seats in ascending seat id order with a bounded wait.

        Raises:
            ResourceNotFoundError: Unknown showing
            SeatNotAvailableError: Locks not acquired before the timeout
        """
        pass

    @abstractmethod
    async def claim(
        self, *, showing_id: int, seat_ids: Sequence[int], booking_reference: str
    ) -> ClaimResult:
        """
        Atomically book every seat for booking_reference, or none of them.

        Raises:
            ValidationError: Empty or duplicated seat ids
            ResourceNotFoundError: Unknown showing
            SeatNotAvailableError: Any seat is booked or unknown, lists the offending ids
        """
        pass

    @abstractmethod
    async def release(
        self,
        *,
        showing_id: int,
        seat_ids: Sequence[int],
        booking_reference: Optional[str] = None,
    ) -> List[SeatState]:
        """Idempotent inverse of claim. Returns the states actually released."""
        pass

    @abstractmethod
    async def snapshot(self, *, showing_id: int) -> List[SeatState]:
        """
        Current states ordered by seat id, without taking locks.

        Raises:
            ResourceNotFoundError: Unknown showing
        """
        pass
