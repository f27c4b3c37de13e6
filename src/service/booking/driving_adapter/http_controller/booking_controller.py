from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.book_tickets_use_case import BookTicketsUseCase
from src.service.booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingDetailResponse,
    BookTicketsRequest,
)
from src.service.shared_kernel.domain.value_object.customer import Customer


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def book_tickets(
    request: BookTicketsRequest,
    use_case: BookTicketsUseCase = Depends(BookTicketsUseCase.depends),
) -> BookingDetailResponse:
    detail = await use_case.execute(
        showing_id=request.showing_id,
        customer=Customer(
            name=request.customer_name,
            email=str(request.customer_email),
            phone=request.customer_phone,
        ),
        seat_ids=request.seat_ids,
    )
    return BookingDetailResponse.from_detail(detail)


@router.get('/{reference}')
@Logger.io
async def get_booking(
    reference: str,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingDetailResponse:
    detail = await use_case.execute(reference=reference)
    return BookingDetailResponse.from_detail(detail)


@router.patch('/{reference}', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_booking(
    reference: str,
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> BookingDetailResponse:
    detail = await use_case.execute(reference=reference)
    return BookingDetailResponse.from_detail(detail)
