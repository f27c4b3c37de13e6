from abc import ABC, abstractmethod

from src.service.showing.domain.showing_entity import Showing


class IShowingRepo(ABC):
    @abstractmethod
    async def create(self, *, showing: Showing) -> Showing:
        """
        Persist a new showing and assign its id

        Returns:
            The stored Showing with id set
        """
        pass

    @abstractmethod
    async def get_by_id(self, *, showing_id: int) -> Showing | None:
        pass

    @abstractmethod
    async def adjust_available_seats(self, *, showing_id: int, delta: int) -> Showing:
        """
        Atomically add delta to the available-seat counter, escalating status.

        Raises:
            ResourceNotFoundError: Unknown showing
        """
        pass
