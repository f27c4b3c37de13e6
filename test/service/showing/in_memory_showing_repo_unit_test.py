import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from src.platform.exception.exceptions import ResourceNotFoundError
from src.service.shared_kernel.domain.enum.showing_status import ShowingStatus
from src.service.showing.domain.showing_entity import Showing
from src.service.showing.driven_adapter.in_memory_showing_repo_impl import (
    InMemoryShowingRepoImpl,
)


START = datetime(2030, 1, 15, 19, 30, tzinfo=timezone.utc)


@pytest.fixture
async def stored(showing_repo: InMemoryShowingRepoImpl) -> Showing:
    showing = Showing.create(
        movie_title='The Matrix',
        theatre_name='Downtown Cinema',
        screen_name='Screen 1',
        start_at=START,
        end_at=START + timedelta(hours=2),
        total_seats=10,
    )
    return await showing_repo.create(showing=showing)


class TestInMemoryShowingRepo:
    @pytest.mark.asyncio
    async def test_get_by_id(self, showing_repo: InMemoryShowingRepoImpl, stored: Showing) -> None:
        assert await showing_repo.get_by_id(showing_id=stored.id) == stored
        assert await showing_repo.get_by_id(showing_id=999) is None

    @pytest.mark.asyncio
    async def test_adjust_escalates_status(
        self, showing_repo: InMemoryShowingRepoImpl, stored: Showing
    ) -> None:
        updated = await showing_repo.adjust_available_seats(showing_id=stored.id, delta=-9)

        assert updated.available_seats == 1
        assert updated.status == ShowingStatus.ALMOST_FULL
        assert await showing_repo.get_by_id(showing_id=stored.id) == updated

    @pytest.mark.asyncio
    async def test_concurrent_adjustments_are_not_lost(
        self, showing_repo: InMemoryShowingRepoImpl, stored: Showing
    ) -> None:
        await asyncio.gather(
            *(showing_repo.adjust_available_seats(showing_id=stored.id, delta=-1) for _ in range(10))
        )

        showing = await showing_repo.get_by_id(showing_id=stored.id)
        assert showing is not None
        assert showing.available_seats == 0
        assert showing.status == ShowingStatus.HOUSEFULL

    @pytest.mark.asyncio
    async def test_adjust_unknown_showing(self, showing_repo: InMemoryShowingRepoImpl) -> None:
        with pytest.raises(ResourceNotFoundError):
            await showing_repo.adjust_available_seats(showing_id=42, delta=-1)
