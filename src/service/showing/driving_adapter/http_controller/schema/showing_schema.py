from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from src.service.seat_inventory.app.dto.seat_availability import SeatAvailability
from src.service.shared_kernel.domain.enum.seat_category import SeatCategory
from src.service.shared_kernel.domain.enum.showing_status import ShowingStatus
from src.service.shared_kernel.driving_adapter.schema.display_label import (
    SEAT_CATEGORY_LABEL,
    SEAT_STATUS_LABEL,
    SHOWING_STATUS_LABEL,
)
from src.service.showing.app.dto.seat_row_layout import SeatRowLayout
from src.service.showing.domain.showing_entity import Showing


class SeatRowRequest(BaseModel):
    row: str = Field(min_length=1, max_length=5)
    seat_count: int = Field(gt=0, le=100)
    category: SeatCategory = SeatCategory.REGULAR
    price: Optional[Decimal] = Field(default=None, gt=0)

    def to_layout(self) -> SeatRowLayout:
        return SeatRowLayout(
            row=self.row, seat_count=self.seat_count, category=self.category, price=self.price
        )


class RegisterShowingRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'movie_title': 'The Matrix',
                'theatre_name': 'Downtown Cinema',
                'screen_name': 'Screen 1',
                'start_at': '2025-01-12T14:00:00+05:30',
                'end_at': '2025-01-12T16:30:00+05:30',
                'layout': [
                    {'row': 'A', 'seat_count': 10, 'category': 'vip'},
                    {'row': 'B', 'seat_count': 12, 'category': 'premium'},
                    {'row': 'C', 'seat_count': 14},
                ],
            }
        }
    )

    movie_title: str = Field(min_length=1, max_length=200)
    theatre_name: str = Field(min_length=1, max_length=200)
    screen_name: str = Field(min_length=1, max_length=100)
    start_at: AwareDatetime
    end_at: AwareDatetime
    layout: List[SeatRowRequest] = Field(min_length=1)
    status: ShowingStatus = ShowingStatus.OPEN_FOR_BOOKING


class ShowingResponse(BaseModel):
    id: int
    movie_title: str
    theatre_name: str
    screen_name: str
    start_at: datetime
    end_at: datetime
    status: str
    status_label: str
    total_seats: int
    available_seats: int

    @classmethod
    def from_showing(cls, showing: Showing) -> 'ShowingResponse':
        return cls(
            id=showing.id or 0,
            movie_title=showing.movie_title,
            theatre_name=showing.theatre_name,
            screen_name=showing.screen_name,
            start_at=showing.start_at,
            end_at=showing.end_at,
            status=showing.status.value,
            status_label=SHOWING_STATUS_LABEL[showing.status],
            total_seats=showing.total_seats,
            available_seats=showing.available_seats,
        )


class SeatStateResponse(BaseModel):
    seat_id: int
    seat_identifier: str
    category: str
    category_label: str
    price: float
    status: str
    status_label: str


class SeatAvailabilityResponse(BaseModel):
    showing_id: int
    showing_status: str
    total_seats: int
    available_seats: int
    seats: List[SeatStateResponse]

    @classmethod
    def from_availability(cls, availability: SeatAvailability) -> 'SeatAvailabilityResponse':
        return cls(
            showing_id=availability.showing_id,
            showing_status=availability.showing_status.value,
            total_seats=availability.total_seats,
            available_seats=availability.available_seats,
            seats=[
                SeatStateResponse(
                    seat_id=state.seat_id,
                    seat_identifier=state.seat.label,
                    category=state.seat.category.value,
                    category_label=SEAT_CATEGORY_LABEL[state.seat.category],
                    price=float(state.price),
                    status=state.status.value,
                    status_label=SEAT_STATUS_LABEL[state.status],
                )
                for state in availability.seats
            ],
        )
