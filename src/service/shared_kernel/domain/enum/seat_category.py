from decimal import Decimal
from enum import StrEnum


class SeatCategory(StrEnum):
    REGULAR = 'regular'
    PREMIUM = 'premium'
    VIP = 'vip'


# Default base price per category when a screen layout does not set one
DEFAULT_CATEGORY_PRICE: dict[SeatCategory, Decimal] = {
    SeatCategory.REGULAR: Decimal('200'),
    SeatCategory.PREMIUM: Decimal('350'),
    SeatCategory.VIP: Decimal('500'),
}
