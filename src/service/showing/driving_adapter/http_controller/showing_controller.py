from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.seat_inventory.app.query.get_seat_availability_use_case import (
    GetSeatAvailabilityUseCase,
)
from src.service.showing.app.command.register_showing_use_case import RegisterShowingUseCase
from src.service.showing.driving_adapter.http_controller.schema.showing_schema import (
    RegisterShowingRequest,
    SeatAvailabilityResponse,
    ShowingResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def register_showing(
    request: RegisterShowingRequest,
    use_case: RegisterShowingUseCase = Depends(RegisterShowingUseCase.depends),
) -> ShowingResponse:
    showing = await use_case.execute(
        movie_title=request.movie_title,
        theatre_name=request.theatre_name,
        screen_name=request.screen_name,
        start_at=request.start_at,
        end_at=request.end_at,
        layout=[row.to_layout() for row in request.layout],
        status=request.status,
    )
    return ShowingResponse.from_showing(showing)


@router.get('/{showing_id}/seats')
@Logger.io
async def get_seat_availability(
    showing_id: int,
    use_case: GetSeatAvailabilityUseCase = Depends(GetSeatAvailabilityUseCase.depends),
) -> SeatAvailabilityResponse:
    availability = await use_case.execute(showing_id=showing_id)
    return SeatAvailabilityResponse.from_availability(availability)
