"""
Display Labels

Human-readable names for domain enums, used only when building responses.
"""

from src.service.shared_kernel.domain.enum.booking_status import BookingStatus, PaymentStatus
from src.service.shared_kernel.domain.enum.seat_category import SeatCategory
from src.service.shared_kernel.domain.enum.seat_status import SeatStatus
from src.service.shared_kernel.domain.enum.showing_status import ShowingStatus


BOOKING_STATUS_LABEL: dict[BookingStatus, str] = {
    BookingStatus.PENDING: 'Pending',
    BookingStatus.CONFIRMED: 'Confirmed',
    BookingStatus.CANCELLED: 'Cancelled',
    BookingStatus.EXPIRED: 'Expired',
    BookingStatus.COMPLETED: 'Completed',
}

PAYMENT_STATUS_LABEL: dict[PaymentStatus, str] = {
    PaymentStatus.PENDING: 'Pending',
    PaymentStatus.PROCESSING: 'Processing',
    PaymentStatus.COMPLETED: 'Completed',
    PaymentStatus.FAILED: 'Failed',
    PaymentStatus.REFUNDED: 'Refunded',
}

SEAT_CATEGORY_LABEL: dict[SeatCategory, str] = {
    SeatCategory.REGULAR: 'Regular',
    SeatCategory.PREMIUM: 'Premium',
    SeatCategory.VIP: 'VIP',
}

SEAT_STATUS_LABEL: dict[SeatStatus, str] = {
    SeatStatus.AVAILABLE: 'Available',
    SeatStatus.BOOKED: 'Booked',
    SeatStatus.BLOCKED: 'Blocked',
    SeatStatus.UNAVAILABLE: 'Unavailable',
}

SHOWING_STATUS_LABEL: dict[ShowingStatus, str] = {
    ShowingStatus.SCHEDULED: 'Scheduled',
    ShowingStatus.OPEN_FOR_BOOKING: 'Open for Booking',
    ShowingStatus.ALMOST_FULL: 'Almost Full',
    ShowingStatus.HOUSEFULL: 'Housefull',
    ShowingStatus.CANCELLED: 'Cancelled',
    ShowingStatus.COMPLETED: 'Completed',
}
