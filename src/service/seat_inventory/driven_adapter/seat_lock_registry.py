"""
Seat Lock Registry

One threading.Lock per (showing_id, seat_id). A hold takes the locks of its
seats in ascending seat id order with non-blocking attempts, all or none:
if any seat is taken, whatever was acquired is dropped again and the caller
sleeps until the next attempt. A waiter therefore never owns a lock nor
ties up a thread, and holds over disjoint seat sets never wait on each other.
"""

import threading
import time
from typing import Dict, Iterable, List, Optional, Tuple

import anyio

from src.platform.exception.exceptions import SeatNotAvailableError
from src.platform.logging.loguru_io import Logger


SeatKey = Tuple[int, int]


class SeatLockRegistry:
    def __init__(self, *, retry_interval: float = 0.005) -> None:
        self.retry_interval = retry_interval
        self._locks: Dict[SeatKey, threading.Lock] = {}
        self._guard = threading.Lock()

    def register(self, *, showing_id: int, seat_ids: Iterable[int]) -> None:
        with self._guard:
            for seat_id in seat_ids:
                self._locks.setdefault((showing_id, seat_id), threading.Lock())

    def try_acquire_ordered(
        self, *, showing_id: int, seat_ids: Iterable[int]
    ) -> Tuple[List[threading.Lock], Optional[int]]:
        """
        One non-blocking pass over the seats in ascending order.

        Seats without a registered lock are skipped; they do not exist in
        the showing and are reported as unavailable by the hold.

        Returns:
            (acquired locks, None) on success, ([], contended seat id) otherwise
        """
        acquired: List[threading.Lock] = []
        for seat_id in sorted(set(seat_ids)):
            lock = self._locks.get((showing_id, seat_id))
            if lock is None:
                continue
            if not lock.acquire(blocking=False):
                self.release_all(acquired)
                return [], seat_id
            acquired.append(lock)
        return acquired, None

    async def acquire_ordered(
        self, *, showing_id: int, seat_ids: Iterable[int], timeout: float
    ) -> List[threading.Lock]:
        """
        Acquire the locks of the given seats, retrying until one shared deadline.

        Raises:
            SeatNotAvailableError: Deadline passed while a seat stayed locked
        """
        seat_ids = list(seat_ids)
        deadline = time.monotonic() + timeout
        while True:
            locks, contended = self.try_acquire_ordered(showing_id=showing_id, seat_ids=seat_ids)
            if contended is None:
                return locks

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                Logger.base.warning(
                    f'⏳ [SEAT_LOCK] Timed out after {timeout}s waiting for seat {contended} '
                    f'of showing {showing_id}'
                )
                raise SeatNotAvailableError(
                    f'Seat {contended} is being booked by another customer, please retry',
                    unavailable_seat_ids=[contended],
                )
            await anyio.sleep(min(self.retry_interval, remaining))

    @staticmethod
    def release_all(locks: List[threading.Lock]) -> None:
        for lock in reversed(locks):
            lock.release()
