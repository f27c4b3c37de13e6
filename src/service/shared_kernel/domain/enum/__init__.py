"""Shared Kernel Enums"""

from src.service.shared_kernel.domain.enum.booking_status import BookingStatus, PaymentStatus
from src.service.shared_kernel.domain.enum.seat_category import (
    DEFAULT_CATEGORY_PRICE,
    SeatCategory,
)
from src.service.shared_kernel.domain.enum.seat_status import SeatStatus
from src.service.shared_kernel.domain.enum.showing_status import ShowingStatus

__all__ = [
    'BookingStatus',
    'DEFAULT_CATEGORY_PRICE',
    'PaymentStatus',
    'SeatCategory',
    'SeatStatus',
    'ShowingStatus',
]
