from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ResourceNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.booking_detail import BookingDetail
from src.service.booking.app.interface.i_booking_ledger import IBookingLedger
from src.service.showing.app.interface.i_showing_repo import IShowingRepo


class GetBookingUseCase:
    def __init__(self, *, booking_ledger: IBookingLedger, showing_repo: IShowingRepo) -> None:
        self.booking_ledger = booking_ledger
        self.showing_repo = showing_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_ledger: IBookingLedger = Depends(Provide[Container.booking_ledger]),
        showing_repo: IShowingRepo = Depends(Provide[Container.showing_repo]),
    ) -> Self:
        return cls(booking_ledger=booking_ledger, showing_repo=showing_repo)

    @Logger.io
    async def execute(self, *, reference: str) -> BookingDetail:
        """Stored booking with its price snapshot as recorded; nothing is repriced."""
        booking = await self.booking_ledger.find_by_reference(reference=reference)
        if not booking:
            raise ResourceNotFoundError(f'Booking not found with reference: {reference}')

        showing = await self.showing_repo.get_by_id(showing_id=booking.showing_id)
        if not showing:
            raise ResourceNotFoundError(f'Showing not found with id: {booking.showing_id}')

        return BookingDetail.from_booking(booking=booking, showing=showing)
