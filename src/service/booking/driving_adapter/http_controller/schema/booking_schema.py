from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.service.booking.app.dto.booking_detail import BookingDetail
from src.service.shared_kernel.driving_adapter.schema.display_label import (
    BOOKING_STATUS_LABEL,
    PAYMENT_STATUS_LABEL,
    SEAT_CATEGORY_LABEL,
)


class BookTicketsRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'showing_id': 1,
                'customer_name': 'Jane Doe',
                'customer_email': 'jane@example.com',
                'customer_phone': '+1-555-0100',
                'seat_ids': [1, 2, 3],
            }
        }
    )

    showing_id: int
    customer_name: str = Field(min_length=1, max_length=100)
    customer_email: EmailStr
    customer_phone: Optional[str] = None
    seat_ids: List[int] = Field(min_length=1, max_length=10)


class CustomerResponse(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None


class ShowDetailsResponse(BaseModel):
    showing_id: int
    movie_title: str
    theatre_name: str
    screen_name: str
    start_at: datetime


class BookedSeatResponse(BaseModel):
    seat_id: int
    seat_identifier: str
    category: str
    category_label: str
    price: float


class AppliedOfferResponse(BaseModel):
    offer_name: str
    discount_amount: float


class PricingResponse(BaseModel):
    base_amount: float
    discount_amount: float
    final_amount: float
    discount_description: str
    applied_offers: List[AppliedOfferResponse] = []


class BookingDetailResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'reference': 'BKMZXW6YTBOI5DEMRT',
                'status': 'confirmed',
                'status_label': 'Confirmed',
                'payment_status': 'pending',
                'payment_status_label': 'Pending',
                'booked_at': '2025-01-10T10:30:00Z',
                'cancelled_at': None,
                'customer': {'name': 'Jane Doe', 'email': 'jane@example.com', 'phone': None},
                'show_details': {
                    'showing_id': 1,
                    'movie_title': 'The Matrix',
                    'theatre_name': 'Downtown Cinema',
                    'screen_name': 'Screen 1',
                    'start_at': '2025-01-12T14:00:00+05:30',
                },
                'seats': [
                    {
                        'seat_id': 1,
                        'seat_identifier': 'A-1',
                        'category': 'regular',
                        'category_label': 'Regular',
                        'price': 200.0,
                    }
                ],
                'pricing': {
                    'base_amount': 200.0,
                    'discount_amount': 40.0,
                    'final_amount': 160.0,
                    'discount_description': '20% Afternoon Discount',
                    'applied_offers': [
                        {'offer_name': 'Afternoon Show Discount (20% off)', 'discount_amount': 40.0}
                    ],
                },
            }
        }
    )

    reference: str
    status: str
    status_label: str
    payment_status: str
    payment_status_label: str
    booked_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    customer: CustomerResponse
    show_details: ShowDetailsResponse
    seats: List[BookedSeatResponse]
    pricing: PricingResponse

    @classmethod
    def from_detail(cls, detail: BookingDetail) -> 'BookingDetailResponse':
        return cls(
            reference=detail.reference,
            status=detail.status.value,
            status_label=BOOKING_STATUS_LABEL[detail.status],
            payment_status=detail.payment_status.value,
            payment_status_label=PAYMENT_STATUS_LABEL[detail.payment_status],
            booked_at=detail.booked_at,
            cancelled_at=detail.cancelled_at,
            customer=CustomerResponse(
                name=detail.customer.name,
                email=detail.customer.email,
                phone=detail.customer.phone,
            ),
            show_details=ShowDetailsResponse(
                showing_id=detail.showing.showing_id,
                movie_title=detail.showing.movie_title,
                theatre_name=detail.showing.theatre_name,
                screen_name=detail.showing.screen_name,
                start_at=detail.showing.start_at,
            ),
            seats=[
                BookedSeatResponse(
                    seat_id=seat.seat_id,
                    seat_identifier=seat.label,
                    category=seat.category.value,
                    category_label=SEAT_CATEGORY_LABEL[seat.category],
                    price=float(seat.price),
                )
                for seat in detail.seats
            ],
            pricing=PricingResponse(
                base_amount=float(detail.price.base_amount),
                discount_amount=float(detail.price.discount_amount),
                final_amount=float(detail.price.final_amount),
                discount_description=detail.price.discount_description,
                applied_offers=[
                    AppliedOfferResponse(
                        offer_name=offer.name, discount_amount=float(offer.discount_amount)
                    )
                    for offer in detail.price.offers
                ],
            ),
        )
