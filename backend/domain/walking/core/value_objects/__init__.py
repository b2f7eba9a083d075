"""Walking domain value objects."""

from .date_range import DateRange
from .insight import Insight, InsightCategory
from .summary_stats import SummaryStats

__all__ = [
    "DateRange",
    "Insight",
    "InsightCategory",
    "SummaryStats",
]
