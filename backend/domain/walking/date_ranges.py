"""Calendar windows for history periods.

Weeks start on Sunday. All ranges are inclusive and computed from a
reference date, never from the wall clock, so callers decide "today".
"""

import calendar
from datetime import date as DateType
from datetime import timedelta

from domain.shared.types import TimePeriod
from domain.walking.core.value_objects.date_range import DateRange


def get_date_range_for_period(period: TimePeriod, reference_date: DateType) -> DateRange:
    """Window of the given period containing reference_date.

    Example:
        >>> get_date_range_for_period(TimePeriod.WEEK, DateType(2025, 3, 5))
        DateRange(start_date=datetime.date(2025, 3, 2), end_date=datetime.date(2025, 3, 8))
    """
    if period == TimePeriod.WEEK:
        # date.weekday(): Monday=0 .. Sunday=6
        days_since_sunday = (reference_date.weekday() + 1) % 7
        start = reference_date - timedelta(days=days_since_sunday)
        return DateRange(start_date=start, end_date=start + timedelta(days=6))

    if period == TimePeriod.MONTH:
        last_day = calendar.monthrange(reference_date.year, reference_date.month)[1]
        return DateRange(
            start_date=reference_date.replace(day=1),
            end_date=reference_date.replace(day=last_day),
        )

    if period == TimePeriod.YEAR:
        return DateRange(
            start_date=DateType(reference_date.year, 1, 1),
            end_date=DateType(reference_date.year, 12, 31),
        )

    raise ValueError(f"Unsupported period: {period}")


def get_last_n_days(days: int, end_date: DateType) -> DateRange:
    """Window of the last `days` days ending on end_date (inclusive)."""
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")
    return DateRange(start_date=end_date - timedelta(days=days - 1), end_date=end_date)
