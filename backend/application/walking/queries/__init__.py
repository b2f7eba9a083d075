"""CQRS Queries for walking domain."""

from .get_day_details import DayDetails, GetDayDetailsQuery, GetDayDetailsQueryHandler
from .get_history import GetHistoryQuery, GetHistoryQueryHandler, HistoryData
from .get_insights import GetInsightsQuery, GetInsightsQueryHandler
from .get_streak import GetStreakQuery, GetStreakQueryHandler
from .get_walks_page import GetWalksPageQuery, GetWalksPageQueryHandler, WalksPage

__all__ = [
    "GetHistoryQuery",
    "GetHistoryQueryHandler",
    "HistoryData",
    "GetDayDetailsQuery",
    "GetDayDetailsQueryHandler",
    "DayDetails",
    "GetInsightsQuery",
    "GetInsightsQueryHandler",
    "GetStreakQuery",
    "GetStreakQueryHandler",
    "GetWalksPageQuery",
    "GetWalksPageQueryHandler",
    "WalksPage",
]
