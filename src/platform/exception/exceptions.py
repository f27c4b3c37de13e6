from typing import Sequence


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ResourceNotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class SeatNotAvailableError(ConflictError):
    """Claim could not complete atomically; no seat state was changed."""

    def __init__(self, message: str, *, unavailable_seat_ids: Sequence[int] = ()) -> None:
        self.unavailable_seat_ids = list(unavailable_seat_ids)
        super().__init__(message)


class BookingStateError(DomainError):
    """Booking already terminal, showing not bookable, or showing time passed."""


class ValidationError(DomainError):
    """Malformed booking request."""


class InternalError(CustomBaseError):
    def __init__(self, message: str = 'Internal server error') -> None:
        super().__init__(message, 500)
