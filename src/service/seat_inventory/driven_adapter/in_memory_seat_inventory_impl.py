"""
In-Memory Seat Inventory

Seat states live in a per-showing dict keyed by seat id. Writes happen only
inside a hold, while the hold owns the lock of every seat it writes;
snapshots copy the dict values without locking.
"""

from contextlib import asynccontextmanager
import threading
from typing import AsyncIterator, Dict, List, Optional, Sequence

from src.platform.exception.exceptions import (
    InternalError,
    ResourceNotFoundError,
    SeatNotAvailableError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.service.seat_inventory.app.dto.claim_result import ClaimResult
from src.service.seat_inventory.app.interface.i_seat_inventory import ISeatHold, ISeatInventory
from src.service.seat_inventory.domain.seat_state_entity import SeatState
from src.service.seat_inventory.driven_adapter.seat_lock_registry import SeatLockRegistry
from src.service.shared_kernel.domain.value_object.seat import Seat


class InMemorySeatHold(ISeatHold):
    def __init__(
        self, *, showing_id: int, seat_ids: List[int], states: Dict[int, SeatState]
    ) -> None:
        self.showing_id = showing_id
        self.seat_ids = seat_ids
        self._states = states
        self._staged: Dict[int, SeatState] = {}
        self._open = True

    def _ensure_open(self) -> None:
        if not self._open:
            raise InternalError('Seat hold used after its locks were released')

    async def claim(self, *, booking_reference: str) -> ClaimResult:
        self._ensure_open()
        unavailable = [
            seat_id
            for seat_id in self.seat_ids
            if (state := self._states.get(seat_id)) is None or not state.is_available
        ]
        if unavailable:
            raise SeatNotAvailableError(
                f'Seats not available: {unavailable}', unavailable_seat_ids=unavailable
            )

        claimed = [
            self._states[seat_id].claim(booking_reference=booking_reference)
            for seat_id in self.seat_ids
        ]
        self._staged = {state.seat_id: state for state in claimed}
        return ClaimResult(
            showing_id=self.showing_id, booking_reference=booking_reference, seats=claimed
        )

    async def release(self, *, booking_reference: Optional[str] = None) -> List[SeatState]:
        self._ensure_open()
        released = [
            state.release()
            for seat_id in self.seat_ids
            if (state := self._states.get(seat_id)) is not None
            and state.is_booked_by(booking_reference)
        ]
        self._staged = {state.seat_id: state for state in released}
        return released

    async def commit(self) -> None:
        self._ensure_open()
        self._states.update(self._staged)
        self._staged = {}

    def close(self) -> None:
        self._staged = {}
        self._open = False


class InMemorySeatInventoryImpl(ISeatInventory):
    def __init__(self, *, lock_timeout_seconds: float = 5.0) -> None:
        self.lock_timeout_seconds = lock_timeout_seconds
        self._showings: Dict[int, Dict[int, SeatState]] = {}
        self._lock_registry = SeatLockRegistry()
        self._guard = threading.Lock()

    def _states_of(self, showing_id: int) -> Dict[int, SeatState]:
        states = self._showings.get(showing_id)
        if states is None:
            raise ResourceNotFoundError(f'Showing not found with id: {showing_id}')
        return states

    @Logger.io
    async def initialize_showing(self, *, showing_id: int, seats: Sequence[Seat]) -> List[SeatState]:
        seat_ids = [seat.id for seat in seats]
        if not seat_ids:
            raise ValidationError('A showing needs at least one seat')
        if len(set(seat_ids)) != len(seat_ids):
            raise ValidationError('Seat ids must be unique within a showing')

        states = {seat.id: SeatState.available(showing_id=showing_id, seat=seat) for seat in seats}
        with self._guard:
            if showing_id in self._showings:
                raise ValidationError(f'Seats of showing {showing_id} are already initialized')
            self._lock_registry.register(showing_id=showing_id, seat_ids=seat_ids)
            self._showings[showing_id] = states

        Logger.base.info(f'🪑 [INIT] Showing {showing_id}: {len(states)} seats available')
        return list(states.values())

    @asynccontextmanager
    async def hold(self, *, showing_id: int, seat_ids: Sequence[int]) -> AsyncIterator[ISeatHold]:
        states = self._states_of(showing_id)
        locks = await self._lock_registry.acquire_ordered(
            showing_id=showing_id, seat_ids=seat_ids, timeout=self.lock_timeout_seconds
        )
        seat_hold = InMemorySeatHold(
            showing_id=showing_id, seat_ids=list(dict.fromkeys(seat_ids)), states=states
        )
        try:
            yield seat_hold
        finally:
            seat_hold.close()
            self._lock_registry.release_all(locks)

    @Logger.io
    async def claim(
        self, *, showing_id: int, seat_ids: Sequence[int], booking_reference: str
    ) -> ClaimResult:
        if not seat_ids:
            raise ValidationError('At least one seat must be selected')
        if len(set(seat_ids)) != len(seat_ids):
            raise ValidationError('Seat ids must not repeat')

        async with self.hold(showing_id=showing_id, seat_ids=seat_ids) as seat_hold:
            result = await seat_hold.claim(booking_reference=booking_reference)
            await seat_hold.commit()

        Logger.base.info(
            f'✅ [CLAIM] Showing {showing_id}: seats {result.seat_ids} booked for {booking_reference}'
        )
        return result

    @Logger.io
    async def release(
        self,
        *,
        showing_id: int,
        seat_ids: Sequence[int],
        booking_reference: Optional[str] = None,
    ) -> List[SeatState]:
        async with self.hold(showing_id=showing_id, seat_ids=seat_ids) as seat_hold:
            released = await seat_hold.release(booking_reference=booking_reference)
            await seat_hold.commit()

        Logger.base.info(
            f'🔓 [RELEASE] Showing {showing_id}: released {[s.seat_id for s in released]}'
        )
        return released

    async def snapshot(self, *, showing_id: int) -> List[SeatState]:
        states = self._states_of(showing_id)
        return sorted(states.values(), key=lambda state: state.seat_id)
