"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.booking.app.command import book_tickets_use_case, cancel_booking_use_case
from src.service.booking.app.query import get_booking_use_case
from src.service.seat_inventory.app.query import get_seat_availability_use_case
from src.service.showing.app.command import register_showing_use_case


WIRE_MODULES: list[ModuleType] = [
    book_tickets_use_case,
    cancel_booking_use_case,
    get_booking_use_case,
    register_showing_use_case,
    get_seat_availability_use_case,
]
