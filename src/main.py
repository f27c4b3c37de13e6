"""
Production FastAPI Application

Run with: granian src.main:app --interface asgi --host 0.0.0.0 --port 8100
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.enum.seat_category import SeatCategory
from src.service.showing.app.command.register_showing_use_case import RegisterShowingUseCase
from src.service.showing.app.dto.seat_row_layout import SeatRowLayout


async def seed_sample_showing() -> None:
    """Register one afternoon showing tomorrow, for local demos."""
    tomorrow = datetime.now(timezone.utc).date() + timedelta(days=1)
    start_at = datetime(tomorrow.year, tomorrow.month, tomorrow.day, 14, tzinfo=timezone.utc)
    use_case = RegisterShowingUseCase(
        showing_repo=container.showing_repo(), seat_inventory=container.seat_inventory()
    )
    showing = await use_case.execute(
        movie_title='The Matrix',
        theatre_name='Downtown Cinema',
        screen_name='Screen 1',
        start_at=start_at,
        end_at=start_at + timedelta(hours=2, minutes=30),
        layout=[
            SeatRowLayout(row='A', seat_count=10, category=SeatCategory.VIP),
            SeatRowLayout(row='B', seat_count=12, category=SeatCategory.PREMIUM),
            SeatRowLayout(row='C', seat_count=14),
            SeatRowLayout(row='D', seat_count=14),
        ],
    )
    Logger.base.info(f'🌱 [Showtime] Sample showing {showing.id} seeded')


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Showtime] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Showtime] Dependency injection wired')

    if settings.SEED_SAMPLE_DATA:
        await seed_sample_showing()

    Logger.base.info('✅ [Showtime] Ready')
    yield

    Logger.base.info('🛑 [Showtime] Shutting down...')
    container.unwire()
    Logger.base.info('👋 [Showtime] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='Showtime Booking System - seat booking with per-seat locking and offer pricing',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
