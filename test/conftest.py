"""
Test Configuration and Fixtures

Environment is set up before any application module is imported, since
settings and the loguru sinks are configured at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ['SEED_SAMPLE_DATA'] = 'false'


_early_setup_test_environment()

from collections.abc import Awaitable, Callable, Generator  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import Any, List, Optional  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.platform.config.di import cleanup  # noqa: E402
from src.service.booking.driven_adapter.in_memory_booking_ledger_impl import (  # noqa: E402
    InMemoryBookingLedgerImpl,
)
from src.service.pricing.domain.pricing_engine import PricingEngine  # noqa: E402
from src.service.seat_inventory.driven_adapter.in_memory_seat_inventory_impl import (  # noqa: E402
    InMemorySeatInventoryImpl,
)
from src.service.shared_kernel.domain.enum.seat_category import SeatCategory  # noqa: E402
from src.service.shared_kernel.domain.enum.showing_status import ShowingStatus  # noqa: E402
from src.service.shared_kernel.domain.value_object.customer import Customer  # noqa: E402
from src.service.showing.app.command.register_showing_use_case import (  # noqa: E402
    RegisterShowingUseCase,
)
from src.service.showing.app.dto.seat_row_layout import SeatRowLayout  # noqa: E402
from src.service.showing.domain.showing_entity import Showing  # noqa: E402
from src.service.showing.driven_adapter.in_memory_showing_repo_impl import (  # noqa: E402
    InMemoryShowingRepoImpl,
)


# Far enough ahead that "already started" never trips
AFTERNOON_START = datetime(2030, 1, 15, 14, 0, tzinfo=timezone.utc)
EVENING_START = datetime(2030, 1, 15, 19, 30, tzinfo=timezone.utc)

# Seat ids: A-1..A-2 -> 1..2 (VIP 500), B-1..B-3 -> 3..5 (PREMIUM 350), C-1..C-5 -> 6..10 (REGULAR 200)
DEFAULT_LAYOUT = [
    SeatRowLayout(row='A', seat_count=2, category=SeatCategory.VIP),
    SeatRowLayout(row='B', seat_count=3, category=SeatCategory.PREMIUM),
    SeatRowLayout(row='C', seat_count=5),
]


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def showing_repo() -> InMemoryShowingRepoImpl:
    return InMemoryShowingRepoImpl(almost_full_ratio=0.1)


@pytest.fixture
def seat_inventory() -> InMemorySeatInventoryImpl:
    return InMemorySeatInventoryImpl(lock_timeout_seconds=1.0)


@pytest.fixture
def booking_ledger() -> InMemoryBookingLedgerImpl:
    return InMemoryBookingLedgerImpl()


@pytest.fixture
def pricing_engine() -> PricingEngine:
    return PricingEngine()


@pytest.fixture
def customer() -> Customer:
    return Customer(name='Jane Doe', email='jane@example.com', phone='+1-555-0100')


@pytest.fixture
def register_showing(
    showing_repo: InMemoryShowingRepoImpl, seat_inventory: InMemorySeatInventoryImpl
) -> Callable[..., Awaitable[Showing]]:
    use_case = RegisterShowingUseCase(showing_repo=showing_repo, seat_inventory=seat_inventory)

    async def _register(
        *,
        start_at: datetime = EVENING_START,
        layout: Optional[List[SeatRowLayout]] = None,
        status: ShowingStatus = ShowingStatus.OPEN_FOR_BOOKING,
    ) -> Showing:
        return await use_case.execute(
            movie_title='The Matrix',
            theatre_name='Downtown Cinema',
            screen_name='Screen 1',
            start_at=start_at,
            end_at=start_at + timedelta(hours=2, minutes=30),
            layout=layout or DEFAULT_LAYOUT,
            status=status,
        )

    return _register


@pytest.fixture
def client() -> Generator[TestClient, Any, None]:
    from src.main import app

    cleanup()
    with TestClient(app) as test_client:
        yield test_client
    cleanup()
