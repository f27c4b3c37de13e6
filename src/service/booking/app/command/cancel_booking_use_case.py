from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ResourceNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.booking_detail import BookingDetail
from src.service.booking.app.interface.i_booking_ledger import IBookingLedger
from src.service.seat_inventory.app.interface.i_seat_inventory import ISeatInventory
from src.service.showing.app.interface.i_showing_repo import IShowingRepo


class CancelBookingUseCase:
    """
    Cancel a booking and give its seats back.

    The booking's seats stay locked while the showing counter and the ledger
    entry are updated, so a cancel can never interleave with a claim on the
    same seats. Seat release is committed only after the ledger accepted the
    cancellation; any failure before that leaves everything as it was.
    """

    def __init__(
        self,
        *,
        showing_repo: IShowingRepo,
        seat_inventory: ISeatInventory,
        booking_ledger: IBookingLedger,
    ) -> None:
        self.showing_repo = showing_repo
        self.seat_inventory = seat_inventory
        self.booking_ledger = booking_ledger

    @classmethod
    @inject
    def depends(
        cls,
        showing_repo: IShowingRepo = Depends(Provide[Container.showing_repo]),
        seat_inventory: ISeatInventory = Depends(Provide[Container.seat_inventory]),
        booking_ledger: IBookingLedger = Depends(Provide[Container.booking_ledger]),
    ) -> Self:
        return cls(
            showing_repo=showing_repo,
            seat_inventory=seat_inventory,
            booking_ledger=booking_ledger,
        )

    @Logger.io
    async def execute(self, *, reference: str) -> BookingDetail:
        booking = await self.booking_ledger.find_by_reference(reference=reference)
        if not booking:
            raise ResourceNotFoundError(f'Booking not found with reference: {reference}')

        async with self.seat_inventory.hold(
            showing_id=booking.showing_id, seat_ids=booking.seat_ids
        ) as seat_hold:
            # Re-read under the seat locks; a concurrent cancel may have won
            current = await self.booking_ledger.find_by_reference(reference=reference)
            if not current:
                raise ResourceNotFoundError(f'Booking not found with reference: {reference}')

            cancelled = current.cancel()
            released = await seat_hold.release(booking_reference=reference)
            showing = await self.showing_repo.adjust_available_seats(
                showing_id=booking.showing_id, delta=len(released)
            )
            try:
                cancelled = await self.booking_ledger.mark_cancelled(booking=cancelled)
            except Exception:
                await self.showing_repo.adjust_available_seats(
                    showing_id=booking.showing_id, delta=-len(released)
                )
                raise
            await seat_hold.commit()

        Logger.base.info(
            f'🚫 [CANCEL] {reference}: released {len(released)} seats of showing {booking.showing_id}'
        )
        return BookingDetail.from_booking(booking=cancelled, showing=showing)
