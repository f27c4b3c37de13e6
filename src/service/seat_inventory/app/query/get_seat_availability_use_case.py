from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ResourceNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.seat_inventory.app.dto.seat_availability import SeatAvailability
from src.service.seat_inventory.app.interface.i_seat_inventory import ISeatInventory
from src.service.showing.app.interface.i_showing_repo import IShowingRepo


class GetSeatAvailabilityUseCase:
    """Lock-free seat map of a showing; may be stale by the time a claim runs."""

    def __init__(self, *, showing_repo: IShowingRepo, seat_inventory: ISeatInventory) -> None:
        self.showing_repo = showing_repo
        self.seat_inventory = seat_inventory

    @classmethod
    @inject
    def depends(
        cls,
        showing_repo: IShowingRepo = Depends(Provide[Container.showing_repo]),
        seat_inventory: ISeatInventory = Depends(Provide[Container.seat_inventory]),
    ) -> Self:
        return cls(showing_repo=showing_repo, seat_inventory=seat_inventory)

    @Logger.io(truncate_content=True)
    async def execute(self, *, showing_id: int) -> SeatAvailability:
        showing = await self.showing_repo.get_by_id(showing_id=showing_id)
        if not showing:
            raise ResourceNotFoundError(f'Showing not found with id: {showing_id}')

        seats = await self.seat_inventory.snapshot(showing_id=showing_id)
        return SeatAvailability(
            showing_id=showing_id,
            showing_status=showing.status,
            total_seats=showing.total_seats,
            available_seats=sum(1 for state in seats if state.is_available),
            seats=seats,
        )
