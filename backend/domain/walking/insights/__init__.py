"""Insight generation for the walking domain."""

from .insight_generator import MAX_INSIGHTS, InsightGenerator

__all__ = ["InsightGenerator", "MAX_INSIGHTS"]
