from enum import StrEnum


class SeatStatus(StrEnum):
    AVAILABLE = 'available'
    BOOKED = 'booked'
    # Administrative states, never produced by claim / release
    BLOCKED = 'blocked'
    UNAVAILABLE = 'unavailable'
