"""
Booking Reference

Customer-facing booking identifier: "BK" followed by 16 base32 characters
drawn from 10 bytes of cryptographic randomness. The generator keeps no
state; uniqueness is checked by the ledger that issues it.
"""

import base64
import secrets
from typing import Callable


REFERENCE_PREFIX = 'BK'
REFERENCE_RANDOM_BYTES = 10  # encodes to exactly 16 base32 chars, no padding


def generate_booking_reference(
    token_bytes: Callable[[int], bytes] = secrets.token_bytes,
) -> str:
    token = base64.b32encode(token_bytes(REFERENCE_RANDOM_BYTES)).decode('ascii')
    return f'{REFERENCE_PREFIX}{token}'
