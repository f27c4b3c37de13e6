"""
Unit tests for BookTicketsUseCase

Runs against the in-memory adapters; collaborator failures are injected
with AsyncMock.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import (
    BookingStateError,
    InternalError,
    ResourceNotFoundError,
    SeatNotAvailableError,
    ValidationError,
)
from src.service.booking.app.command.book_tickets_use_case import BookTicketsUseCase
from src.service.shared_kernel.domain.enum.booking_status import BookingStatus, PaymentStatus
from src.service.shared_kernel.domain.enum.seat_status import SeatStatus
from src.service.shared_kernel.domain.enum.showing_status import ShowingStatus
from src.service.shared_kernel.domain.value_object.customer import Customer


AFTERNOON_START = datetime(2030, 1, 15, 14, 0, tzinfo=timezone.utc)
EVENING_START = datetime(2030, 1, 15, 19, 30, tzinfo=timezone.utc)


@pytest.fixture
def use_case(
    showing_repo, seat_inventory, booking_ledger, pricing_engine, settings
) -> BookTicketsUseCase:
    return BookTicketsUseCase(
        showing_repo=showing_repo,
        seat_inventory=seat_inventory,
        booking_ledger=booking_ledger,
        pricing_engine=pricing_engine,
        settings=settings,
    )


class TestBookTicketsSuccess:
    @pytest.mark.asyncio
    async def test_evening_booking_gets_bulk_offer_only(
        self, use_case, register_showing, customer, seat_inventory, showing_repo
    ) -> None:
        showing = await register_showing(start_at=EVENING_START)

        # C-1, C-2 regular 200 + A-1 VIP 500
        detail = await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[6, 7, 1])

        assert detail.reference.startswith('BK')
        assert detail.status == BookingStatus.CONFIRMED
        assert detail.payment_status == PaymentStatus.PENDING
        assert [seat.label for seat in detail.seats] == ['C-1', 'C-2', 'A-1']
        assert detail.price.base_amount == Decimal('900.00')
        assert detail.price.discount_amount == Decimal('100.00')
        assert detail.price.final_amount == Decimal('800.00')
        assert detail.price.discount_description == '50% off 3rd ticket'
        assert detail.showing.movie_title == 'The Matrix'

        states = {s.seat_id: s for s in await seat_inventory.snapshot(showing_id=showing.id)}
        assert all(states[seat_id].booking_reference == detail.reference for seat_id in (1, 6, 7))
        stored_showing = await showing_repo.get_by_id(showing_id=showing.id)
        assert stored_showing.available_seats == 7

    @pytest.mark.asyncio
    async def test_afternoon_booking_stacks_offers(
        self, use_case, register_showing, customer
    ) -> None:
        showing = await register_showing(start_at=AFTERNOON_START)

        detail = await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[6, 7, 1])

        assert detail.price.discount_amount == Decimal('260.00')
        assert detail.price.final_amount == Decimal('640.00')
        assert detail.price.discount_description == '20% Afternoon Discount + 50% off 3rd ticket'
        assert [offer.name for offer in detail.price.offers] == [
            'Afternoon Show Discount (20% off)',
            '50% off on 3rd Ticket',
        ]

    @pytest.mark.asyncio
    async def test_booking_is_stored_in_ledger(
        self, use_case, register_showing, customer, booking_ledger
    ) -> None:
        showing = await register_showing()

        detail = await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[1])

        stored = await booking_ledger.find_by_reference(reference=detail.reference)
        assert stored is not None
        assert stored.seat_ids == [1]
        assert stored.customer == customer

    @pytest.mark.asyncio
    async def test_last_seats_make_showing_housefull(
        self, use_case, register_showing, customer, showing_repo
    ) -> None:
        showing = await register_showing()

        await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[1, 2, 3, 4, 5])
        await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[6, 7, 8, 9])
        almost_full = await showing_repo.get_by_id(showing_id=showing.id)
        await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[10])
        housefull = await showing_repo.get_by_id(showing_id=showing.id)

        assert almost_full.status == ShowingStatus.ALMOST_FULL
        assert housefull.status == ShowingStatus.HOUSEFULL
        assert housefull.available_seats == 0


class TestBookTicketsRejected:
    @pytest.mark.asyncio
    async def test_seat_taken(self, use_case, register_showing, customer, showing_repo) -> None:
        showing = await register_showing()
        await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[2])

        with pytest.raises(SeatNotAvailableError) as exc_info:
            await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[1, 2])

        assert exc_info.value.unavailable_seat_ids == [2]
        stored_showing = await showing_repo.get_by_id(showing_id=showing.id)
        assert stored_showing.available_seats == 9

    @pytest.mark.asyncio
    async def test_unknown_showing(self, use_case, customer) -> None:
        with pytest.raises(ResourceNotFoundError):
            await use_case.execute(showing_id=999, customer=customer, seat_ids=[1])

    @pytest.mark.asyncio
    @pytest.mark.parametrize('status', [ShowingStatus.CANCELLED, ShowingStatus.COMPLETED])
    async def test_closed_showing(self, use_case, register_showing, customer, status) -> None:
        showing = await register_showing(status=status)

        with pytest.raises(BookingStateError):
            await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[1])

    @pytest.mark.asyncio
    async def test_showing_already_started(self, use_case, register_showing, customer) -> None:
        showing = await register_showing(start_at=EVENING_START)

        with pytest.raises(BookingStateError):
            await use_case.execute(
                showing_id=showing.id,
                customer=customer,
                seat_ids=[1],
                requested_at=EVENING_START + timedelta(minutes=1),
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'seat_ids,customer_override',
        [
            ([], None),
            ([1, 1], None),
            (list(range(1, 12)), None),
            ([1], Customer(name=' ', email='jane@example.com')),
            ([1], Customer(name='Jane Doe', email='not-an-email')),
        ],
    )
    async def test_invalid_request(
        self, use_case, register_showing, customer, seat_ids, customer_override
    ) -> None:
        showing = await register_showing()

        with pytest.raises(ValidationError):
            await use_case.execute(
                showing_id=showing.id, customer=customer_override or customer, seat_ids=seat_ids
            )


class TestBookTicketsCompensation:
    @pytest.mark.asyncio
    async def test_store_failure_releases_claimed_seats(
        self,
        showing_repo,
        seat_inventory,
        booking_ledger,
        pricing_engine,
        settings,
        register_showing,
        customer,
    ) -> None:
        showing = await register_showing()
        failing_ledger = AsyncMock()
        failing_ledger.mint_reference = AsyncMock(return_value='BKFAILINGSTORE00')
        failing_ledger.store = AsyncMock(side_effect=RuntimeError('disk full'))
        use_case = BookTicketsUseCase(
            showing_repo=showing_repo,
            seat_inventory=seat_inventory,
            booking_ledger=failing_ledger,
            pricing_engine=pricing_engine,
            settings=settings,
        )

        with pytest.raises(InternalError):
            await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[1, 2])

        states = await seat_inventory.snapshot(showing_id=showing.id)
        assert all(state.status == SeatStatus.AVAILABLE for state in states)
        stored_showing = await showing_repo.get_by_id(showing_id=showing.id)
        assert stored_showing.available_seats == 10
        failing_ledger.discard_reference.assert_awaited_once_with(reference='BKFAILINGSTORE00')

    @pytest.mark.asyncio
    async def test_failed_claim_stores_nothing(
        self, showing_repo, settings, pricing_engine, register_showing, customer
    ) -> None:
        showing = await register_showing()
        seat_inventory = AsyncMock()
        seat_inventory.claim = AsyncMock(
            side_effect=SeatNotAvailableError('taken', unavailable_seat_ids=[1])
        )
        booking_ledger = AsyncMock()
        booking_ledger.mint_reference = AsyncMock(return_value='BKREF00000000000')
        use_case = BookTicketsUseCase(
            showing_repo=showing_repo,
            seat_inventory=seat_inventory,
            booking_ledger=booking_ledger,
            pricing_engine=pricing_engine,
            settings=settings,
        )

        with pytest.raises(SeatNotAvailableError):
            await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[1])

        booking_ledger.store.assert_not_called()
        seat_inventory.release.assert_not_called()
        booking_ledger.discard_reference.assert_awaited_once_with(reference='BKREF00000000000')

    @pytest.mark.asyncio
    async def test_failed_bookings_leave_no_reference_in_flight(
        self, use_case, register_showing, customer, booking_ledger
    ) -> None:
        showing = await register_showing()
        taken = await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[2])

        for _ in range(20):
            with pytest.raises(SeatNotAvailableError):
                await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[1, 2])

        assert booking_ledger._issued == set()
        assert list(booking_ledger._bookings) == [taken.reference]

    @pytest.mark.asyncio
    async def test_counter_failure_undoes_the_booking(
        self,
        showing_repo,
        seat_inventory,
        booking_ledger,
        pricing_engine,
        settings,
        register_showing,
        customer,
    ) -> None:
        showing = await register_showing()
        broken_counter_repo = AsyncMock()
        broken_counter_repo.get_by_id = AsyncMock(side_effect=showing_repo.get_by_id)
        broken_counter_repo.adjust_available_seats = AsyncMock(
            side_effect=InternalError('seat counter out of range')
        )
        use_case = BookTicketsUseCase(
            showing_repo=broken_counter_repo,
            seat_inventory=seat_inventory,
            booking_ledger=booking_ledger,
            pricing_engine=pricing_engine,
            settings=settings,
        )

        with pytest.raises(InternalError):
            await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[1, 2])

        states = await seat_inventory.snapshot(showing_id=showing.id)
        assert all(state.status == SeatStatus.AVAILABLE for state in states)
        assert booking_ledger._bookings == {}
        assert booking_ledger._issued == set()
        stored_showing = await showing_repo.get_by_id(showing_id=showing.id)
        assert stored_showing.available_seats == 10

    @pytest.mark.asyncio
    async def test_failed_release_does_not_hide_the_original_error(
        self, showing_repo, seat_inventory, pricing_engine, settings, register_showing, customer
    ) -> None:
        showing = await register_showing()
        flaky_inventory = AsyncMock()
        flaky_inventory.claim = AsyncMock(side_effect=seat_inventory.claim)
        flaky_inventory.release = AsyncMock(
            side_effect=SeatNotAvailableError('busy', unavailable_seat_ids=[1])
        )
        failing_ledger = AsyncMock()
        failing_ledger.mint_reference = AsyncMock(return_value='BKSTUCKSEATS0000')
        failing_ledger.store = AsyncMock(side_effect=RuntimeError('disk full'))
        use_case = BookTicketsUseCase(
            showing_repo=showing_repo,
            seat_inventory=flaky_inventory,
            booking_ledger=failing_ledger,
            pricing_engine=pricing_engine,
            settings=settings,
        )

        with pytest.raises(InternalError) as exc_info:
            await use_case.execute(showing_id=showing.id, customer=customer, seat_ids=[1])

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        # Seats are still booked under the reference, so it stays reserved
        failing_ledger.discard_reference.assert_not_awaited()
