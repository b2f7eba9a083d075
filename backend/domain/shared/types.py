"""Shared domain types used across the walking domain and its surfaces."""

from enum import Enum


class TimePeriod(str, Enum):
    """History window options for statistics and insights."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
