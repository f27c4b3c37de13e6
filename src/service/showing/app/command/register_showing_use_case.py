"""
Register Showing Use Case

Schedules a showing on a screen and opens its seats for booking.
Seat ids are assigned in layout order, starting at 1.
"""

from datetime import datetime
from typing import List, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.seat_inventory.app.interface.i_seat_inventory import ISeatInventory
from src.service.shared_kernel.domain.enum.showing_status import ShowingStatus
from src.service.shared_kernel.domain.value_object.seat import Seat
from src.service.showing.app.dto.seat_row_layout import SeatRowLayout
from src.service.showing.app.interface.i_showing_repo import IShowingRepo
from src.service.showing.domain.showing_entity import Showing


class RegisterShowingUseCase:
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

    @staticmethod
    def build_seats(*, screen_name: str, layout: Sequence[SeatRowLayout]) -> List[Seat]:
        rows = [row.row for row in layout]
        if len(set(rows)) != len(rows):
            raise ValidationError('Row labels must be unique within a screen')

        seats: List[Seat] = []
        for row in layout:
            if row.seat_count <= 0:
                raise ValidationError(f'Row {row.row} must have at least one seat')
            for number in range(1, row.seat_count + 1):
                seats.append(
                    Seat(
                        id=len(seats) + 1,
                        screen_name=screen_name,
                        row=row.row,
                        number=number,
                        category=row.category,
                        base_price=row.seat_price,
                    )
                )
        return seats

    @Logger.io
    async def execute(
        self,
        *,
        movie_title: str,
        theatre_name: str,
        screen_name: str,
        start_at: datetime,
        end_at: datetime,
        layout: Sequence[SeatRowLayout],
        status: ShowingStatus = ShowingStatus.OPEN_FOR_BOOKING,
    ) -> Showing:
        """
        Flow:
        1. Build seats from the layout
        2. Create and persist the showing (gets its id)
        3. Initialize AVAILABLE seat states in the inventory
        """
        seats = self.build_seats(screen_name=screen_name, layout=layout)
        showing = Showing.create(
            movie_title=movie_title,
            theatre_name=theatre_name,
            screen_name=screen_name,
            start_at=start_at,
            end_at=end_at,
            total_seats=len(seats),
            status=status,
        )
        showing = await self.showing_repo.create(showing=showing)
        await self.seat_inventory.initialize_showing(showing_id=showing.id or 0, seats=seats)

        Logger.base.info(
            f'🎬 [SHOWING] Registered {showing.id}: "{movie_title}" at {start_at.isoformat()} '
            f'on {theatre_name}/{screen_name} with {len(seats)} seats'
        )
        return showing
