"""Get walks page query - paged walk listing for history views."""

import logging
from dataclasses import dataclass
from datetime import date as DateType
from datetime import datetime, timezone
from typing import List, Optional

from domain.shared.types import TimePeriod
from domain.walking.core.entities import WalkRecord
from domain.walking.core.exceptions import InvalidInputError
from domain.walking.core.ports.repository import IWalkingRepository
from domain.walking.core.value_objects import DateRange
from domain.walking.date_ranges import get_date_range_for_period, get_last_n_days

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class WalksPage:
    """
    One page of walks.

    Attributes:
        date_range: Inclusive window the walks were read from
        walks: Walks of the page, most recent first
        page: Zero-based page index
        page_size: Requested page size
        total_count: Walks in the whole window
    """

    date_range: DateRange
    walks: List[WalkRecord]
    page: int
    page_size: int
    total_count: int

    @property
    def has_more(self) -> bool:
        return (self.page * self.page_size) + len(self.walks) < self.total_count


@dataclass(frozen=True)
class GetWalksPageQuery:
    """
    Query: Get one page of walks.

    Attributes:
        user_id: User ID
        period: Window label, used when last_days is not set
        reference_date: Any date inside the window (if None, today in UTC)
        last_days: Read the last N days ending on reference_date instead
        page: Zero-based page index
        page_size: Walks per page (1 to MAX_PAGE_SIZE)
    """

    user_id: str
    period: TimePeriod = TimePeriod.WEEK
    reference_date: Optional[DateType] = None
    last_days: Optional[int] = None
    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE


class GetWalksPageQueryHandler:
    """Handler for GetWalksPageQuery."""

    def __init__(self, repository: IWalkingRepository):
        self._repository = repository

    async def handle(self, query: GetWalksPageQuery) -> WalksPage:
        """
        Load one page of walks.

        Raises:
            InvalidInputError: If page, page_size or last_days is out of range
            StoreFailureError: If a store read fails
        """
        if query.page < 0:
            raise InvalidInputError(f"page must be non-negative, got {query.page}")
        if not 1 <= query.page_size <= MAX_PAGE_SIZE:
            raise InvalidInputError(
                f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {query.page_size}"
            )

        reference = query.reference_date or datetime.now(timezone.utc).date()
        if query.last_days is not None:
            try:
                date_range = get_last_n_days(query.last_days, reference)
            except ValueError as e:
                raise InvalidInputError(str(e)) from e
        else:
            date_range = get_date_range_for_period(query.period, reference)

        walks, total = await self._repository.list_walks_page(
            query.user_id,
            date_range.start_date,
            date_range.end_date,
            offset=query.page * query.page_size,
            limit=query.page_size,
        )

        logger.debug(
            "Walks page loaded",
            extra={
                "user_id": query.user_id,
                "start_date": date_range.start_date.isoformat(),
                "page": query.page,
                "walks": len(walks),
                "total": total,
            },
        )

        return WalksPage(
            date_range=date_range,
            walks=walks,
            page=query.page,
            page_size=query.page_size,
            total_count=total,
        )
