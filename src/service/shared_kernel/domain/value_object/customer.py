from typing import Optional

import attrs


@attrs.define(frozen=True)
class Customer:
    name: str
    email: str
    phone: Optional[str] = None
