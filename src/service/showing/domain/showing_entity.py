from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import BookingStateError, InternalError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.enum.showing_status import ShowingStatus


# Statuses that seat-count changes may move between
_SEAT_DRIVEN_STATUSES = (
    ShowingStatus.SCHEDULED,
    ShowingStatus.OPEN_FOR_BOOKING,
    ShowingStatus.ALMOST_FULL,
    ShowingStatus.HOUSEFULL,
)
_NOT_BOOKABLE_STATUSES = (
    ShowingStatus.CANCELLED,
    ShowingStatus.COMPLETED,
    ShowingStatus.HOUSEFULL,
)


@attrs.define
class Showing:
    movie_title: str
    theatre_name: str
    screen_name: str
    start_at: datetime
    end_at: datetime
    total_seats: int
    available_seats: int
    status: ShowingStatus = ShowingStatus.SCHEDULED
    id: Optional[int] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        movie_title: str,
        theatre_name: str,
        screen_name: str,
        start_at: datetime,
        end_at: datetime,
        total_seats: int,
        status: ShowingStatus = ShowingStatus.OPEN_FOR_BOOKING,
    ) -> 'Showing':
        if not movie_title or not theatre_name or not screen_name:
            raise ValidationError('Movie title, theatre name and screen name are required')
        if start_at.tzinfo is None or end_at.tzinfo is None:
            raise ValidationError('Showing times must include a timezone offset')
        if end_at <= start_at:
            raise ValidationError('Showing must end after it starts')
        if total_seats <= 0:
            raise ValidationError('Showing must have at least one seat')

        return cls(
            movie_title=movie_title,
            theatre_name=theatre_name,
            screen_name=screen_name,
            start_at=start_at,
            end_at=end_at,
            total_seats=total_seats,
            available_seats=total_seats,
            status=status,
        )

    def in_discount_window(self, *, start_hour: int = 12, end_hour: int = 17) -> bool:
        """Whether the showing starts within [start_hour, end_hour) theatre local time."""
        return start_hour <= self.start_at.hour < end_hour

    @Logger.io
    def ensure_bookable(self, *, at: datetime) -> None:
        """
        Raises:
            BookingStateError: Showing is cancelled, completed, sold out or already started
        """
        if self.status in _NOT_BOOKABLE_STATUSES:
            raise BookingStateError(f'Showing {self.id} is not open for booking ({self.status})')
        if self.start_at <= at:
            raise BookingStateError(f'Showing {self.id} has already started')

    @Logger.io
    def adjust_available_seats(self, *, delta: int, almost_full_ratio: float) -> 'Showing':
        """
        Apply a seat-count change and escalate the status to match.

        HOUSEFULL at zero, ALMOST_FULL at or below almost_full_ratio of
        total, back to OPEN_FOR_BOOKING once seats free up. CANCELLED and
        COMPLETED keep their status.
        """
        available = self.available_seats + delta
        if available < 0 or available > self.total_seats:
            raise InternalError(
                f'Showing {self.id} seat counter out of range: '
                f'{available}/{self.total_seats} after delta {delta}'
            )

        status = self.status
        if status in _SEAT_DRIVEN_STATUSES:
            if available == 0:
                status = ShowingStatus.HOUSEFULL
            elif available <= self.total_seats * almost_full_ratio:
                status = ShowingStatus.ALMOST_FULL
            elif status in (ShowingStatus.ALMOST_FULL, ShowingStatus.HOUSEFULL):
                status = ShowingStatus.OPEN_FOR_BOOKING

        return attrs.evolve(self, available_seats=available, status=status)
