"""Unit tests for GetWalksPageQueryHandler."""

from datetime import date

import pytest

from application.walking.queries.get_walks_page import (
    GetWalksPageQuery,
    GetWalksPageQueryHandler,
)
from domain.shared.types import TimePeriod
from domain.walking.core.exceptions import InvalidInputError

USER_ID = "user123"


@pytest.fixture
def handler(repository) -> GetWalksPageQueryHandler:
    return GetWalksPageQueryHandler(repository)


class TestGetWalksPage:
    @pytest.mark.asyncio
    async def test_pages_through_year(self, handler, repository, make_walk) -> None:
        for day in range(1, 6):
            await repository.save_walk(make_walk(date(2025, 3, day), 1000 * day))

        first = await handler.handle(
            GetWalksPageQuery(
                user_id=USER_ID,
                period=TimePeriod.YEAR,
                reference_date=date(2025, 6, 1),
                page=0,
                page_size=2,
            )
        )
        last = await handler.handle(
            GetWalksPageQuery(
                user_id=USER_ID,
                period=TimePeriod.YEAR,
                reference_date=date(2025, 6, 1),
                page=2,
                page_size=2,
            )
        )

        assert [w.steps for w in first.walks] == [5000, 4000]
        assert first.total_count == 5
        assert first.has_more is True
        assert [w.steps for w in last.walks] == [1000]
        assert last.has_more is False

    @pytest.mark.asyncio
    async def test_last_days_window(self, handler, repository, make_walk) -> None:
        await repository.save_walk(make_walk(date(2025, 3, 1), 1000))
        await repository.save_walk(make_walk(date(2025, 3, 6), 2000))

        result = await handler.handle(
            GetWalksPageQuery(user_id=USER_ID, reference_date=date(2025, 3, 7), last_days=3)
        )

        assert result.date_range.start_date == date(2025, 3, 5)
        assert [w.steps for w in result.walks] == [2000]
        assert result.total_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs",
        [{"page": -1}, {"page_size": 0}, {"page_size": 101}, {"last_days": 0}],
    )
    async def test_invalid_paging_rejected(self, handler, kwargs) -> None:
        with pytest.raises(InvalidInputError):
            await handler.handle(
                GetWalksPageQuery(user_id=USER_ID, reference_date=date(2025, 3, 7), **kwargs)
            )
