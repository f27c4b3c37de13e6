from itertools import count
import threading
from typing import Dict

import attrs

from src.platform.exception.exceptions import ResourceNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.showing.app.interface.i_showing_repo import IShowingRepo
from src.service.showing.domain.showing_entity import Showing


class InMemoryShowingRepoImpl(IShowingRepo):
    def __init__(self, *, almost_full_ratio: float = 0.1) -> None:
        self.almost_full_ratio = almost_full_ratio
        self._showings: Dict[int, Showing] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    @Logger.io
    async def create(self, *, showing: Showing) -> Showing:
        with self._lock:
            stored = attrs.evolve(showing, id=next(self._ids))
            self._showings[stored.id] = stored  # type: ignore[index]
        return stored

    async def get_by_id(self, *, showing_id: int) -> Showing | None:
        return self._showings.get(showing_id)

    @Logger.io
    async def adjust_available_seats(self, *, showing_id: int, delta: int) -> Showing:
        with self._lock:
            showing = self._showings.get(showing_id)
            if showing is None:
                raise ResourceNotFoundError(f'Showing not found with id: {showing_id}')

            updated = showing.adjust_available_seats(
                delta=delta, almost_full_ratio=self.almost_full_ratio
            )
            self._showings[showing_id] = updated

        if updated.status != showing.status:
            Logger.base.info(
                f'📊 [SHOWING] Showing {showing_id}: {showing.status} -> {updated.status} '
                f'({updated.available_seats}/{updated.total_seats} seats left)'
            )
        return updated
