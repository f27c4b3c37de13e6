"""Shared Kernel Value Objects"""

from src.service.shared_kernel.domain.value_object.customer import Customer
from src.service.shared_kernel.domain.value_object.money import round_amount, to_amount
from src.service.shared_kernel.domain.value_object.seat import Seat

__all__ = ['Customer', 'Seat', 'round_amount', 'to_amount']
