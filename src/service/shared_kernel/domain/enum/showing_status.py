"""
Showing Status Enum

Lifecycle of a scheduled screening. Seat-count changes may move a showing
between OPEN_FOR_BOOKING, ALMOST_FULL and HOUSEFULL; the other transitions
belong to the scheduling side.
"""

from enum import StrEnum


class ShowingStatus(StrEnum):
    SCHEDULED = 'scheduled'
    OPEN_FOR_BOOKING = 'open_for_booking'
    ALMOST_FULL = 'almost_full'
    HOUSEFULL = 'housefull'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'
