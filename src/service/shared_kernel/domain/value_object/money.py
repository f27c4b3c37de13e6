"""Money helpers - all amounts are Decimal, rounded half-up to cents."""

from decimal import ROUND_HALF_UP, Decimal


CENT = Decimal('0.01')
ZERO = Decimal('0.00')


def to_amount(value: Decimal | int | float | str) -> Decimal:
    # str() keeps 0.1 as 0.1 instead of its binary float expansion
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_amount(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
