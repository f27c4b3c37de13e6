"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.booking.driven_adapter.in_memory_booking_ledger_impl import (
    InMemoryBookingLedgerImpl,
)
from src.service.pricing.domain.offer_rules import PricingPolicy
from src.service.pricing.domain.pricing_engine import PricingEngine
from src.service.seat_inventory.driven_adapter.in_memory_seat_inventory_impl import (
    InMemorySeatInventoryImpl,
)
from src.service.showing.driven_adapter.in_memory_showing_repo_impl import (
    InMemoryShowingRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Showing collaborator (seat counter + status escalation)
    showing_repo = providers.Singleton(
        InMemoryShowingRepoImpl,
        almost_full_ratio=config_service.provided.ALMOST_FULL_RATIO,
    )

    # Seat inventory (per-seat locks, shared by every request)
    seat_inventory = providers.Singleton(
        InMemorySeatInventoryImpl,
        lock_timeout_seconds=config_service.provided.SEAT_LOCK_TIMEOUT_SECONDS,
    )

    # Booking ledger
    booking_ledger = providers.Singleton(
        InMemoryBookingLedgerImpl,
        max_attempts=config_service.provided.REFERENCE_MINT_ATTEMPTS,
    )

    # Pricing (stateless)
    pricing_policy = providers.Singleton(
        PricingPolicy,
        discount_window_percent=config_service.provided.DISCOUNT_WINDOW_PERCENT,
        bulk_min_seats=config_service.provided.BULK_OFFER_MIN_SEATS,
        bulk_percent=config_service.provided.BULK_OFFER_PERCENT,
    )
    pricing_engine = providers.Singleton(PricingEngine, policy=pricing_policy)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
