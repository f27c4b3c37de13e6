from datetime import datetime, timezone
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
import uuid_utils

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    CustomBaseError,
    InternalError,
    ResourceNotFoundError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.booking_detail import BookingDetail
from src.service.booking.app.interface.i_booking_ledger import IBookingLedger
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.value_object.booked_seat import BookedSeat
from src.service.booking.domain.value_object.price_snapshot import PriceSnapshot
from src.service.pricing.domain.pricing_engine import PricingEngine
from src.service.seat_inventory.app.interface.i_seat_inventory import ISeatInventory
from src.service.shared_kernel.domain.value_object.customer import Customer
from src.service.showing.app.interface.i_showing_repo import IShowingRepo


class BookTicketsUseCase:
    """
    Book a set of seats for one showing.

    Flow:
    1. Validate request and showing (nothing locked yet)
    2. Mint a booking reference
    3. Claim all seats under that reference (all-or-nothing)
    4. Price the claimed seats
    5. Store the booking
    6. Decrement the showing's available-seat counter

    A failure after step 2 discards the reference; after step 3 it also
    releases the claimed seats and drops a stored booking.
    """

    def __init__(
        self,
        *,
        showing_repo: IShowingRepo,
        seat_inventory: ISeatInventory,
        booking_ledger: IBookingLedger,
        pricing_engine: PricingEngine,
        settings: Settings,
    ) -> None:
        self.showing_repo = showing_repo
        self.seat_inventory = seat_inventory
        self.booking_ledger = booking_ledger
        self.pricing_engine = pricing_engine
        self.settings = settings

    @classmethod
    @inject
    def depends(
        cls,
        showing_repo: IShowingRepo = Depends(Provide[Container.showing_repo]),
        seat_inventory: ISeatInventory = Depends(Provide[Container.seat_inventory]),
        booking_ledger: IBookingLedger = Depends(Provide[Container.booking_ledger]),
        pricing_engine: PricingEngine = Depends(Provide[Container.pricing_engine]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            showing_repo=showing_repo,
            seat_inventory=seat_inventory,
            booking_ledger=booking_ledger,
            pricing_engine=pricing_engine,
            settings=settings,
        )

    def _validate_request(self, *, customer: Customer, seat_ids: List[int]) -> None:
        if not customer.name or not customer.name.strip():
            raise ValidationError('Customer name is required')
        if not customer.email or '@' not in customer.email:
            raise ValidationError('A valid customer email is required')
        if not seat_ids:
            raise ValidationError('At least one seat must be selected')
        if len(seat_ids) > self.settings.MAX_SEATS_PER_BOOKING:
            raise ValidationError(
                f'Maximum {self.settings.MAX_SEATS_PER_BOOKING} seats per booking'
            )
        if len(set(seat_ids)) != len(seat_ids):
            raise ValidationError('Seat ids must not repeat')

    @Logger.io
    async def execute(
        self,
        *,
        showing_id: int,
        customer: Customer,
        seat_ids: List[int],
        requested_at: Optional[datetime] = None,
    ) -> BookingDetail:
        self._validate_request(customer=customer, seat_ids=seat_ids)

        showing = await self.showing_repo.get_by_id(showing_id=showing_id)
        if not showing:
            raise ResourceNotFoundError(f'Showing not found with id: {showing_id}')
        showing.ensure_bookable(at=requested_at or datetime.now(timezone.utc))

        # Seats are claimed under the reference, so it must exist before the claim
        reference = await self.booking_ledger.mint_reference()
        try:
            claim = await self.seat_inventory.claim(
                showing_id=showing_id, seat_ids=seat_ids, booking_reference=reference
            )
        except Exception:
            await self.booking_ledger.discard_reference(reference=reference)
            raise

        try:
            pricing = self.pricing_engine.price(
                seat_prices=claim.seat_prices,
                is_discount_window=showing.in_discount_window(
                    start_hour=self.settings.DISCOUNT_WINDOW_START_HOUR,
                    end_hour=self.settings.DISCOUNT_WINDOW_END_HOUR,
                ),
            )
            booking = Booking.create(
                id=uuid_utils.uuid7(),
                reference=reference,
                showing_id=showing_id,
                customer=customer,
                seats=[BookedSeat.from_seat_state(state) for state in claim.seats],
                price=PriceSnapshot.from_pricing(pricing),
            )
            booking = await self.booking_ledger.store(booking=booking)
            showing = await self.showing_repo.adjust_available_seats(
                showing_id=showing_id, delta=-len(claim.seats)
            )
        except Exception as e:
            Logger.base.error(
                f'↩️ [BOOK] Recording {reference} failed, releasing seats {claim.seat_ids}'
            )
            await self._roll_back(
                showing_id=showing_id, seat_ids=claim.seat_ids, reference=reference
            )
            if isinstance(e, CustomBaseError):
                raise
            raise InternalError(f'Failed to record booking {reference}') from e

        Logger.base.info(
            f'🎟️ [BOOK] {reference}: {len(claim.seats)} seats for showing {showing_id}, '
            f'final {booking.price.final_amount}'
        )
        return BookingDetail.from_booking(booking=booking, showing=showing)

    async def _roll_back(self, *, showing_id: int, seat_ids: List[int], reference: str) -> None:
        """Undo a claim whose booking was not recorded; the caller re-raises the cause."""
        try:
            await self.seat_inventory.release(
                showing_id=showing_id, seat_ids=seat_ids, booking_reference=reference
            )
        except Exception:
            # Seats are still booked under the reference, so it stays reserved
            Logger.base.exception(
                f'❌ [BOOK] Could not release seats {seat_ids} of unrecorded booking {reference}'
            )
            return
        await self.booking_ledger.discard_reference(reference=reference)
